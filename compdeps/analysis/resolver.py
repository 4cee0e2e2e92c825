"""Include resolution.

Maps every raw include of every file to the file it refers to and records
the evidence later phases need: file dependency edges, which files are
included at all, which are included across component boundaries, and the
include search path fragment each non-local include requires.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional, Set

from compdeps.analysis.lookup import LookupTable
from compdeps.core.model import Component, ComponentTable, FileTable, RawInclude, SourceFile
from compdeps.parsers.known_headers import KnownHeaders
from compdeps.utils.path_utils import join_relative

logger = logging.getLogger("compdeps.analysis.resolver")


def include_path_fragment(resolved_path: str, include_text: str, component_root: str) -> str:
    """Return the search path needed to reach ``resolved_path`` as ``include_text``.

    The directory that has to be on the search path is what remains of the
    resolved path once the include text and its separator are cut off. It
    is expressed relative to the owning component root: ``"."`` for the
    root itself, ``""`` when the include text reaches above the root.

    Examples:
        >>> include_path_fragment("lib/include/a.h", "a.h", "lib")
        'include'
        >>> include_path_fragment("lib/include/a.h", "include/a.h", "lib")
        '.'
        >>> include_path_fragment("x/lib/a.h", "lib/a.h", "x/lib")
        ''
    """
    prefix = resolved_path[: max(0, len(resolved_path) - len(include_text) - 1)]
    if len(prefix) == len(component_root):
        return "."
    if len(prefix) > len(component_root) + 1:
        return prefix[len(component_root) + 1 :]
    return ""


class IncludeResolver:
    """Resolve raw includes against the file table and lookup table.

    Unresolvable includes never raise: ambiguous ones are collected in
    ``ambiguous`` (lowercased include text to consuming files) and
    unrecognised ones in ``unknown_headers``.
    """

    def __init__(
        self,
        files: FileTable,
        components: ComponentTable,
        lookup: LookupTable,
        predefined: Optional[Mapping[str, Component]] = None,
        known_headers: Optional[KnownHeaders] = None,
    ) -> None:
        self.files = files
        self.components = components
        self.lookup = lookup
        self.predefined: Mapping[str, Component] = predefined or {}
        self.known_headers = known_headers or KnownHeaders()
        self.ambiguous: Dict[str, List[str]] = {}
        self.unknown_headers: Set[str] = set()

    def resolve_all(self) -> None:
        """Resolve the includes of every file in the table."""
        edges = 0
        for source in self.files:
            for include in source.raw_includes:
                if self.resolve(source, include):
                    edges += 1
        logger.info(
            "Resolved %d include edges (%d ambiguous suffixes, %d unknown headers)",
            edges,
            len(self.ambiguous),
            len(self.unknown_headers),
        )

    def resolve(self, source: SourceFile, include: RawInclude) -> bool:
        """Resolve one include of ``source``.

        Returns:
            True when a file dependency edge was recorded.
        """
        # A quoted include next to the including file wins over any search
        # path and is never ambiguous.
        if not include.is_angle:
            local_path = join_relative(source.directory, include.text)
            local = self.files.by_path(local_path) if local_path else None
            if local is not None:
                local.has_include = True
                source.dependencies.add(local.id)
                return True

        lowered = include.text.lower()
        resolved = self.lookup.get(lowered)
        owner = self.components.get(source.component)

        if self.lookup.is_ambiguous(lowered):
            logger.debug("Ambiguous include %s in %s", lowered, source.path)
            self.ambiguous.setdefault(lowered, []).append(source.path)
            return False

        predefined = self.predefined.get(lowered)
        if predefined is not None:
            owner.priv_deps.add(predefined.id)
            return False

        dep = self.files.by_path(resolved) if resolved else None
        if dep is None:
            if not self.known_headers.is_known(include.text):
                self.unknown_headers.add(include.text)
            return False

        source.dependencies.add(dep.id)
        dep_component = self.components.get(dep.component)
        fragment = include_path_fragment(dep.path, include.text, dep_component.root)
        if fragment:
            dep.include_paths.add(fragment)

        if dep.component != source.component:
            owner.priv_deps.add(dep.component)
            dep.has_external_include = True
        dep.has_include = True
        return True


__all__ = ["IncludeResolver", "include_path_fragment"]
