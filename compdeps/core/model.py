"""In-memory model of a scanned source tree.

Files and components live in arena-style tables and refer to each other by
integer handle, so the model has no cyclic object ownership. Each table
also keeps a lookup-by-key index (file path, component root).
"""

from __future__ import annotations

import logging
import posixpath
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, NamedTuple, Optional, Set, Tuple

logger = logging.getLogger("compdeps.core.model")

COMPILATION_UNIT_EXTENSIONS = frozenset({".c", ".C", ".cc", ".cpp", ".m", ".mm"})
CODE_EXTENSIONS = COMPILATION_UNIT_EXTENSIONS | frozenset(
    {".h", ".H", ".hpp", ".hh", ".tcc", ".ipp", ".inc"}
)


class ComponentType(str, Enum):
    """Build unit kinds."""

    LIBRARY = "library"
    EXECUTABLE = "executable"
    UNITTEST = "unittest"
    # Predefined third-party pseudo-components.
    EXTERNAL = "external"


class RawInclude(NamedTuple):
    """An include directive as written in source."""

    text: str
    is_angle: bool


@dataclass(eq=False)
class SourceFile:
    """One source or header file tracked by the project."""

    id: int
    path: str
    component: int
    raw_includes: Tuple[RawInclude, ...] = ()
    dependencies: Set[int] = field(default_factory=set)
    has_include: bool = False
    has_external_include: bool = False
    include_paths: Set[str] = field(default_factory=set)

    @property
    def directory(self) -> str:
        return posixpath.dirname(self.path)

    @property
    def is_compilation_unit(self) -> bool:
        return posixpath.splitext(self.path)[1] in COMPILATION_UNIT_EXTENSIONS


@dataclass(eq=False)
class Component:
    """One logical build unit rooted at a directory.

    Predefined third-party components are flagged ``external``; they never
    own files and are only ever the target of a private dependency.
    """

    id: int
    root: str
    type: Optional[ComponentType] = None
    external: bool = False
    name: str = ""
    files: Set[int] = field(default_factory=set)
    priv_deps: Set[int] = field(default_factory=set)
    pub_deps: Set[int] = field(default_factory=set)
    priv_incl: Set[str] = field(default_factory=set)
    pub_incl: Set[str] = field(default_factory=set)

    def __post_init__(self) -> None:
        if not self.name:
            self.name = posixpath.basename(self.root) or self.root


class FileTable:
    """Arena of SourceFile records indexed by handle and by path."""

    def __init__(self) -> None:
        self._files: List[SourceFile] = []
        self._by_path: Dict[str, int] = {}

    def create(
        self, path: str, component: int, raw_includes: Tuple[RawInclude, ...] = ()
    ) -> SourceFile:
        """Register a file; a second create of the same path returns the first record."""
        existing = self._by_path.get(path)
        if existing is not None:
            logger.warning("File %s registered twice", path)
            return self._files[existing]
        record = SourceFile(
            id=len(self._files),
            path=path,
            component=component,
            raw_includes=tuple(raw_includes),
        )
        self._files.append(record)
        self._by_path[path] = record.id
        return record

    def get(self, handle: int) -> SourceFile:
        return self._files[handle]

    def by_path(self, path: str) -> Optional[SourceFile]:
        handle = self._by_path.get(path)
        return None if handle is None else self._files[handle]

    def clear(self) -> None:
        self._files.clear()
        self._by_path.clear()

    def __contains__(self, path: object) -> bool:
        return path in self._by_path

    def __iter__(self) -> Iterator[SourceFile]:
        return iter(self._files)

    def __len__(self) -> int:
        return len(self._files)


class ComponentTable:
    """Arena of Component records indexed by handle and by root."""

    def __init__(self) -> None:
        self._components: List[Component] = []
        self._by_root: Dict[str, int] = {}

    def create(
        self,
        root: str,
        type: Optional[ComponentType] = None,
        external: bool = False,
        name: str = "",
    ) -> Component:
        """Register a component root, returning the existing one if present."""
        existing = self._by_root.get(root)
        if existing is not None:
            component = self._components[existing]
            if type is not None and component.type is None:
                component.type = type
            return component
        component = Component(
            id=len(self._components),
            root=root,
            type=type,
            external=external,
            name=name,
        )
        self._components.append(component)
        self._by_root[root] = component.id
        return component

    def get(self, handle: int) -> Component:
        return self._components[handle]

    def by_root(self, root: str) -> Optional[Component]:
        handle = self._by_root.get(root)
        return None if handle is None else self._components[handle]

    def owner_of(self, path: str) -> Optional[Component]:
        """Return the component with the longest root that prefixes ``path``.

        Only proper directory prefixes count: ``lib`` owns ``lib/a.c`` but
        not ``libfoo/a.c``, and a root never owns itself.
        """
        directory = posixpath.dirname(path)
        while directory:
            handle = self._by_root.get(directory)
            if handle is not None and not self._components[handle].external:
                return self._components[handle]
            directory = posixpath.dirname(directory)
        return None

    def real(self) -> Iterator[Component]:
        """Iterate components discovered in the tree (no predefined ones)."""
        return (c for c in self._components if not c.external)

    def clear(self) -> None:
        self._components.clear()
        self._by_root.clear()

    def __contains__(self, root: object) -> bool:
        return root in self._by_root

    def __iter__(self) -> Iterator[Component]:
        return iter(self._components)

    def __len__(self) -> int:
        return len(self._components)
