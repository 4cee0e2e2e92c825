"""Component dependency graph and build pipeline.

Edges point from a consuming component to the component it depends on and
carry a ``visibility`` attribute (``public`` or ``private``).
"""

from __future__ import annotations

import itertools
import logging
from typing import TYPE_CHECKING, List, Optional

import networkx as nx

from compdeps.graph.condensation import build_condensation_dag

if TYPE_CHECKING:
    from compdeps.project import Project

logger = logging.getLogger("compdeps.graph.components")

PUBLIC = "public"
PRIVATE = "private"


def build_component_graph(project: "Project") -> nx.DiGraph:
    """Build a DiGraph of components keyed by root.

    Args:
        project: A loaded project.

    Returns:
        nx.DiGraph with one node per component (predefined ones included).
    """
    graph = nx.DiGraph()
    for component in project.components:
        graph.add_node(
            component.root,
            name=component.name,
            type=component.type.value if component.type else "",
            external=component.external,
            files=len(component.files),
            pub_incl=sorted(component.pub_incl),
            priv_incl=sorted(component.priv_incl),
        )

    for component in project.components.real():
        for handle in component.pub_deps:
            graph.add_edge(component.root, project.components.get(handle).root, visibility=PUBLIC)
        for handle in component.priv_deps:
            graph.add_edge(component.root, project.components.get(handle).root, visibility=PRIVATE)

    logger.debug(
        "Component graph: %d nodes, %d edges",
        graph.number_of_nodes(),
        graph.number_of_edges(),
    )
    return graph


def find_cycles(graph: nx.DiGraph, limit: Optional[int] = None) -> List[List[str]]:
    """Return up to ``limit`` simple dependency cycles, each rotated to start at its smallest root."""
    cycles = []
    for cycle in itertools.islice(nx.simple_cycles(graph), limit):
        start = cycle.index(min(cycle))
        cycles.append(cycle[start:] + cycle[:start])
    return sorted(cycles)


def build_pipeline(graph: nx.DiGraph, include_external: bool = False) -> List[List[str]]:
    """Linearize the component graph into build stages.

    Every component appears after all components it depends on. Members
    of a dependency cycle share one stage. Stage members are sorted.

    Args:
        graph: Component graph from ``build_component_graph``.
        include_external: Keep predefined third-party components.

    Returns:
        List of stages, each a sorted list of component roots.
    """
    condensed = build_condensation_dag(graph)
    # Reverse so dependencies come before their consumers.
    ordering = condensed.dag.reverse(copy=False)

    stages: List[List[str]] = []
    for generation in nx.topological_generations(ordering):
        stage = sorted(
            member
            for cluster in generation
            for member in condensed.members(cluster)
            if include_external or not graph.nodes[member].get("external", False)
        )
        if stage:
            stages.append(stage)
    return stages


__all__ = ["PRIVATE", "PUBLIC", "build_component_graph", "build_pipeline", "find_cycles"]
