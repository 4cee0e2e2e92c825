"""Public graph API surface."""

from compdeps.graph.components import (
    PRIVATE,
    PUBLIC,
    build_component_graph,
    build_pipeline,
    find_cycles,
)
from compdeps.graph.condensation import CondensationResult, build_condensation_dag

__all__ = [
    "CondensationResult",
    "PRIVATE",
    "PUBLIC",
    "build_component_graph",
    "build_condensation_dag",
    "build_pipeline",
    "find_cycles",
]
