"""CLI command to print the build pipeline and validate acyclicity.

Components are printed stage by stage, dependencies first. Dependency
cycles between components are reported; when requested, they fail the
process so that CI pipelines can enforce acyclicity.
"""

from __future__ import annotations

import logging
from typing import List

from compdeps.cli.common import RECOVERABLE_CLI_ERRORS, load_project
from compdeps.graph import (
    build_component_graph,
    build_condensation_dag,
    build_pipeline,
    find_cycles,
)

logger = logging.getLogger("compdeps.cli.pipeline")


def pipeline_command(args) -> int:
    """Execute pipeline command.

    Args:
        args: Parsed command-line arguments.

    Returns:
        int: Exit code (0 for success, non-zero for failure).
    """
    try:
        project = load_project(args)
        graph = build_component_graph(project)

        for index, stage in enumerate(build_pipeline(graph), start=1):
            print(f"{index}: {' '.join(stage)}")
        for members in build_condensation_dag(graph).cyclic_clusters():
            print(f"cycle: {' '.join(members)}")

        # Interpret limit: <= 0 means "no limit".
        limit_arg = getattr(args, "limit", None)
        limit = limit_arg if isinstance(limit_arg, int) and limit_arg > 0 else None

        cycles: List[List[str]] = find_cycles(graph, limit=limit)
        if not cycles:
            logger.info("Component graph has no dependency cycles")
            return 0

        logger.warning("Detected %d cycle(s) between components", len(cycles))
        for idx, cycle in enumerate(cycles, start=1):
            # Present a closed loop for readability: A -> B -> C -> A
            logger.warning("Cycle %d: %s", idx, " -> ".join(cycle + [cycle[0]]))

        return 1 if getattr(args, "fail_on_cycle", False) else 0

    except RECOVERABLE_CLI_ERRORS as e:
        logger.error("Pipeline command failed: %s", e)
        return 1
