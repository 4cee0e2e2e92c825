"""SCC condensation of the component graph.

The condensed graph collapses each strongly connected component into a
single cluster node so that algorithms that require a DAG (such as build
ordering) work even when components depend on each other cyclically. Each
cluster node carries its original members.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

import networkx as nx

logger = logging.getLogger("compdeps.graph.condensation")


@dataclass(frozen=True)
class CondensationResult:
    """Container describing a condensation DAG.

    Attributes:
        dag: Directed acyclic graph whose nodes represent SCC clusters.
    """

    dag: nx.DiGraph

    def members(self, cluster_id: str) -> List[str]:
        return list(self.dag.nodes[cluster_id]["members"])

    def cyclic_clusters(self) -> List[List[str]]:
        """Member lists of clusters that stand for an actual cycle."""
        return [
            list(attrs["members"])
            for _, attrs in self.dag.nodes(data=True)
            if attrs["member_count"] > 1
        ]


def _component_sort_key(component: Sequence[str]) -> Tuple[int, Sequence[str]]:
    """Sorting helper to keep cluster IDs deterministic across runs."""
    return (len(component), component)


def build_condensation_dag(graph: nx.DiGraph, *, node_prefix: str = "scc:") -> CondensationResult:
    """Collapse strongly connected components into a DAG view.

    Args:
        graph: Component graph.
        node_prefix: Prefix for generated cluster node IDs.

    Returns:
        CondensationResult describing the condensed DAG.
    """
    cluster_graph = nx.DiGraph()
    membership: Dict[str, str] = {}

    if graph.number_of_nodes() == 0:
        return CondensationResult(dag=cluster_graph)

    components = [sorted(str(n) for n in scc) for scc in nx.strongly_connected_components(graph)]
    components.sort(key=_component_sort_key)

    for index, members in enumerate(components, start=1):
        cluster_id = f"{node_prefix}{index}"
        cluster_graph.add_node(cluster_id, members=members, member_count=len(members))
        for member in members:
            membership[member] = cluster_id

    for source, target in graph.edges():
        src_cluster = membership[str(source)]
        dst_cluster = membership[str(target)]
        if src_cluster != dst_cluster:
            cluster_graph.add_edge(src_cluster, dst_cluster)

    logger.debug(
        "Built condensation DAG: %d clusters, %d edges",
        cluster_graph.number_of_nodes(),
        cluster_graph.number_of_edges(),
    )
    return CondensationResult(dag=cluster_graph)
