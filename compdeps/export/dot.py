"""DOT export of the component dependency graph."""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import networkx as nx

from compdeps.graph import PUBLIC, build_component_graph

if TYPE_CHECKING:
    from compdeps.project import Project

logger = logging.getLogger("compdeps.export.dot")


def _escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"', '\\"')


def to_dot_graph(project: "Project") -> nx.DiGraph:
    """Component graph with DOT-friendly string attributes only.

    Nodes get synthetic IDs (``c0``, ``c1``, ...); the component root only
    appears in the quoted label.
    """
    graph = build_component_graph(project)
    dot = nx.DiGraph()
    node_ids = {}
    for index, (node, attrs) in enumerate(graph.nodes(data=True)):
        node_id = f"c{index}"
        node_ids[node] = node_id
        shape = "box" if attrs.get("external") else "ellipse"
        dot.add_node(
            node_id,
            label=f'"{_escape(str(node))}\\n{attrs.get("type", "")}"',
            shape=shape,
        )
    for source, target, attrs in graph.edges(data=True):
        style = "solid" if attrs.get("visibility") == PUBLIC else "dashed"
        dot.add_edge(node_ids[source], node_ids[target], style=style)
    return dot


def export_dot(project: "Project", output_path: Path) -> bool:
    """Export the component graph to DOT format.

    Args:
        project: Loaded project.
        output_path: Output file path.

    Returns:
        bool: False when no DOT writer is installed.
    """
    logger.info("Exporting component graph to DOT: %s", output_path)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    dot = to_dot_graph(project)

    # Use pydot if available, otherwise pygraphviz
    try:
        from networkx.drawing.nx_pydot import write_dot

        write_dot(dot, str(output_path))
    except ImportError:
        try:
            from networkx.drawing.nx_agraph import write_dot as write_agraph_dot

            write_agraph_dot(dot, str(output_path))
        except ImportError:
            logger.warning("Neither pydot nor pygraphviz available, DOT export skipped")
            return False

    logger.info(
        "DOT export completed: %d nodes, %d edges",
        dot.number_of_nodes(),
        dot.number_of_edges(),
    )
    return True
