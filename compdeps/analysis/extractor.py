"""Component-level dependency and include path extraction.

Runs after visibility propagation. Dependencies reached through a file the
component exposes become public; include paths of exposed files become
public include paths.
"""

import logging
from typing import Callable, Optional

from compdeps.core.model import Component, ComponentTable, ComponentType, FileTable
from compdeps.utils.path_utils import last_segment

logger = logging.getLogger("compdeps.analysis.extractor")

PackageRootPredicate = Callable[[str], bool]


def classify_component(
    component: Component,
    has_external_includes: bool,
    is_package_root: Optional[PackageRootPredicate] = None,
) -> ComponentType:
    """Decide whether a component is a unit test, a library or an executable."""
    if last_segment(component.root) == "test":
        return ComponentType.UNITTEST
    if has_external_includes or (is_package_root and is_package_root(component.root)):
        return ComponentType.LIBRARY
    return ComponentType.EXECUTABLE


def extract_public_dependencies(
    files: FileTable,
    components: ComponentTable,
    is_package_root: Optional[PackageRootPredicate] = None,
) -> None:
    """Promote dependencies reachable through exposed files and set types."""
    for component in components.real():
        has_external_includes = False
        for handle in sorted(component.files):
            source = files.get(handle)
            if not source.has_external_include:
                continue
            has_external_includes = True
            for dep_handle in source.dependencies:
                dep_component = files.get(dep_handle).component
                component.priv_deps.discard(dep_component)
                component.pub_deps.add(dep_component)

        component.pub_deps.discard(component.id)
        component.priv_deps.discard(component.id)
        component.type = classify_component(
            component, has_external_includes, is_package_root
        )
        logger.debug(
            "Component %s: %s, %d public / %d private deps",
            component.root,
            component.type.value,
            len(component.pub_deps),
            len(component.priv_deps),
        )


def extract_include_paths(files: FileTable, components: ComponentTable) -> None:
    """Split each component's include paths into public and private."""
    for component in components.real():
        for handle in component.files:
            source = files.get(handle)
            if not source.has_include:
                continue
            if source.has_external_include:
                component.pub_incl.update(source.include_paths)
            else:
                component.priv_incl.update(source.include_paths)
        component.priv_incl -= component.pub_incl


__all__ = [
    "classify_component",
    "extract_include_paths",
    "extract_public_dependencies",
]
