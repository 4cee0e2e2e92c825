"""JSON export for scanned projects."""

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict

from compdeps.graph import build_component_graph, build_pipeline, find_cycles

if TYPE_CHECKING:
    from compdeps.project import Project

logger = logging.getLogger("compdeps.export.json")


def project_to_dict(project: "Project") -> Dict[str, Any]:
    """Convert the project model to plain JSON-serializable data."""
    components = []
    for component in sorted(project.components, key=lambda c: c.root):
        components.append(
            {
                "root": component.root,
                "name": component.name,
                "type": component.type.value if component.type else None,
                "external": component.external,
                "files": sorted(project.files.get(h).path for h in component.files),
                "pub_deps": project.roots(component.pub_deps),
                "priv_deps": project.roots(component.priv_deps),
                "pub_incl": sorted(component.pub_incl),
                "priv_incl": sorted(component.priv_incl),
            }
        )

    files = []
    for source in sorted(project.files, key=lambda f: f.path):
        files.append(
            {
                "path": source.path,
                "component": project.component_of(source).root,
                "includes": [
                    {"text": inc.text, "angle": inc.is_angle} for inc in source.raw_includes
                ],
                "dependencies": project.dependencies_of(source.path),
                "has_include": source.has_include,
                "has_external_include": source.has_external_include,
                "include_paths": sorted(source.include_paths),
            }
        )

    graph = build_component_graph(project)
    return {
        "summary": project.summary(),
        "components": components,
        "files": files,
        "pipeline": build_pipeline(graph),
        "cycles": find_cycles(graph),
        "diagnostics": {
            "unknown_headers": sorted(project.unknown_headers),
            "ambiguous": {k: list(v) for k, v in sorted(project.ambiguous.items())},
            "collisions": {k: sorted(v) for k, v in sorted(project.collisions.items())},
            "orphans": list(project.orphans),
        },
    }


def export_json(project: "Project", output_path: Path) -> None:
    """Export the project model to a JSON file.

    Args:
        project: Loaded project.
        output_path: Output file path.
    """
    logger.info("Exporting project to JSON: %s", output_path)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    data = project_to_dict(project)

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)

    logger.info(
        "JSON export completed: %d components, %d files",
        len(data["components"]),
        len(data["files"]),
    )
