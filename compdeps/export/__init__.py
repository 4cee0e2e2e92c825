"""Project exporters."""

from compdeps.export.dot import export_dot, to_dot_graph
from compdeps.export.json import export_json, project_to_dict
from compdeps.export.text import render_text

__all__ = ["export_dot", "export_json", "project_to_dict", "render_text", "to_dot_graph"]
