"""Project aggregate: one scan of a source tree.

A reload runs the phases strictly in order:

    populate → lookup table → resolve includes → propagate visibility
             → public dependencies → include paths

Every phase only adds to the sets filled by earlier ones. Problems found
along the way (ambiguous includes, unknown headers, files outside any
component) are collected as diagnostics and never abort the run.
"""

from __future__ import annotations

import logging
import posixpath
from pathlib import Path
from typing import Any, Dict, List, Optional, Set

from compdeps.analysis import (
    IncludeResolver,
    LookupTable,
    build_lookup_table,
    extract_include_paths,
    extract_public_dependencies,
    propagate_external_includes,
)
from compdeps.config import AnalyzerConfig
from compdeps.core.model import Component, ComponentTable, ComponentType, FileTable, SourceFile
from compdeps.parsers import KnownHeaders, read_includes
from compdeps.utils.path_utils import to_relative_posix
from compdeps.utils.scanner import is_code, walk_tree

logger = logging.getLogger("compdeps.project")

COMPONENT_MARKERS = ("include", "src")
TEST_DIR = "test"
EXTERNAL_ROOT_PREFIX = "external:"


class Project:
    """Files, components and diagnostics of a scanned source tree."""

    def __init__(
        self,
        root_path: Optional[Path] = None,
        config: Optional[AnalyzerConfig] = None,
        load: bool = True,
    ) -> None:
        """Initialize the project and, unless ``load`` is False, scan it.

        Args:
            root_path: Root of the source tree; defaults to the working directory.
            config: Analyzer configuration; defaults apply when omitted.
            load: Run a full reload right away.
        """
        self.root_path = Path(root_path) if root_path is not None else Path.cwd()
        self.config = config or AnalyzerConfig.default()
        self.known_headers = KnownHeaders(
            self.config.known_headers, self.config.known_header_prefixes
        )

        self.files = FileTable()
        self.components = ComponentTable()
        self.lookup = LookupTable()
        self.predefined: Dict[str, Component] = {}
        self.unknown_headers: Set[str] = set()
        self.ambiguous: Dict[str, List[str]] = {}
        self.orphans: List[str] = []

        if load:
            self.reload()

    @property
    def collisions(self) -> Dict[str, Set[str]]:
        return self.lookup.collisions

    def reload(self) -> None:
        """Discard all state and rescan the tree."""
        logger.info("Scanning %s", self.root_path)
        self.unknown_headers = set()
        self.ambiguous = {}
        self.orphans = []
        self.components.clear()
        self.files.clear()
        self.predefined = {}

        self._register_predefined_components()
        self._load_file_list()

        self.lookup = build_lookup_table(self.files)
        resolver = IncludeResolver(
            self.files,
            self.components,
            self.lookup,
            predefined=self.predefined,
            known_headers=self.known_headers,
        )
        resolver.resolve_all()
        self.ambiguous = resolver.ambiguous
        self.unknown_headers = resolver.unknown_headers
        self._report_ambiguous()

        propagate_external_includes(self.files)
        extract_public_dependencies(
            self.files, self.components, self.config.is_package_root
        )
        extract_include_paths(self.files, self.components)
        logger.info(
            "Scan complete: %d components, %d files",
            sum(1 for _ in self.components.real()),
            len(self.files),
        )

    def _register_predefined_components(self) -> None:
        for key, name in self.config.predefined_components.items():
            component = self.components.create(
                EXTERNAL_ROOT_PREFIX + name,
                type=ComponentType.EXTERNAL,
                external=True,
                name=name,
            )
            self.predefined[key] = component

    def _load_file_list(self) -> None:
        for rel_path, is_dir in walk_tree(self.root_path, self.config.blacklist):
            if is_dir:
                self._maybe_add_component(rel_path)
                continue
            if not is_code(posixpath.splitext(rel_path)[1]):
                continue
            component = self.components.owner_of(rel_path)
            if component is None:
                logger.warning("Found file %s outside of any component", rel_path)
                self.orphans.append(rel_path)
                continue
            self._read_code(rel_path, component)

    def _maybe_add_component(self, rel_path: str) -> None:
        directory = self.root_path / rel_path
        if not any((directory / marker).is_dir() for marker in COMPONENT_MARKERS):
            return
        self.components.create(rel_path)
        logger.debug("Discovered component %s", rel_path)
        if (directory / TEST_DIR).is_dir():
            self.components.create(f"{rel_path}/{TEST_DIR}", type=ComponentType.UNITTEST)
            logger.debug("Discovered test component %s/%s", rel_path, TEST_DIR)

    def _read_code(self, rel_path: str, component: Component) -> SourceFile:
        includes = read_includes(self.root_path / rel_path)
        source = self.files.create(rel_path, component.id, tuple(includes))
        component.files.add(source.id)
        return source

    def _report_ambiguous(self) -> None:
        if not self.ambiguous:
            return
        logger.warning("Ambiguous includes found!")
        for suffix in sorted(self.ambiguous):
            candidates = sorted(self.lookup.collisions.get(suffix, ()))
            consumers = self.ambiguous[suffix]
            logger.warning(
                "Include name %s could point to %d files (%s); included from: %s",
                suffix,
                len(candidates),
                ", ".join(candidates),
                ", ".join(consumers),
            )

    # ===== Queries =====

    def component(self, root: str) -> Optional[Component]:
        return self.components.by_root(root)

    def file(self, path: str) -> Optional[SourceFile]:
        return self.files.by_path(to_relative_posix(path))

    def component_of(self, source: SourceFile) -> Component:
        return self.components.get(source.component)

    def dependencies_of(self, path: str) -> List[str]:
        """Return the sorted paths a file directly includes."""
        source = self.file(path)
        if source is None:
            return []
        return sorted(self.files.get(h).path for h in source.dependencies)

    def roots(self, handles: Set[int]) -> List[str]:
        """Translate component handles to sorted component roots."""
        return sorted(self.components.get(h).root for h in handles)

    def summary(self) -> Dict[str, Any]:
        counts = {t.value: 0 for t in ComponentType if t is not ComponentType.EXTERNAL}
        for component in self.components.real():
            if component.type is not None:
                counts[component.type.value] += 1
        return {
            "root": str(self.root_path),
            "components": sum(counts.values()),
            "component_types": counts,
            "files": len(self.files),
            "compilation_units": sum(1 for f in self.files if f.is_compilation_unit),
            "ambiguous_includes": len(self.ambiguous),
            "unknown_headers": len(self.unknown_headers),
            "orphan_files": len(self.orphans),
        }


__all__ = ["Project"]
