"""Plain-text dump of a scanned project.

Lists every component followed by the build pipeline. The format is meant
for humans and diffs, not for machine consumption.
"""

import logging
import sys
from typing import TYPE_CHECKING, List, Optional, TextIO

from compdeps.graph import build_component_graph, build_pipeline

if TYPE_CHECKING:
    from compdeps.project import Project

logger = logging.getLogger("compdeps.export.text")


def _join(items: List[str]) -> str:
    return " ".join(items) if items else "-"


def render_text(project: "Project", stream: Optional[TextIO] = None) -> None:
    """Write the component listing and pipeline to ``stream`` (stdout by default)."""
    out = stream or sys.stdout
    for component in sorted(project.components.real(), key=lambda c: c.root):
        kind = component.type.value if component.type else "unknown"
        out.write(f"Component {component.root} ({kind})\n")
        out.write(f"  files:            {len(component.files)}\n")
        out.write(f"  public deps:      {_join(project.roots(component.pub_deps))}\n")
        out.write(f"  private deps:     {_join(project.roots(component.priv_deps))}\n")
        out.write(f"  public includes:  {_join(sorted(component.pub_incl))}\n")
        out.write(f"  private includes: {_join(sorted(component.priv_incl))}\n")
        out.write("\n")

    out.write("Pipeline:\n")
    for stage in build_pipeline(build_component_graph(project)):
        out.write(" ".join(stage) + "\n")

    if project.unknown_headers:
        out.write("\nUnknown headers:\n")
        for header in sorted(project.unknown_headers):
            out.write(f"  {header}\n")
    if project.ambiguous:
        out.write("\nAmbiguous includes:\n")
        for suffix in sorted(project.ambiguous):
            out.write(f"  {suffix}: {' '.join(project.ambiguous[suffix])}\n")
