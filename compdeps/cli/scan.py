"""Scan command implementation."""

import logging
import sys
import time

from rich.console import Console
from rich.table import Table

from compdeps.cli.common import RECOVERABLE_CLI_ERRORS, load_project
from compdeps.export.text import render_text
from compdeps.project import Project

logger = logging.getLogger("compdeps.cli.scan")

EXIT_DIAGNOSTICS = 2


def scan_command(args) -> int:
    """Execute scan command.

    Args:
        args: Parsed command-line arguments.

    Returns:
        int: Exit code.
    """
    try:
        return _scan_command_impl(args)
    except RECOVERABLE_CLI_ERRORS as e:
        logger.error("Scan failed: %s", e)
        return 1


def _scan_command_impl(args) -> int:
    logger.debug("=== Compdeps Scan ===")
    logger.debug("Root: %s", args.root)
    start_time = time.time()

    project = load_project(args)
    logger.info("Scan finished in %.2fs", time.time() - start_time)

    if getattr(args, "summary", False):
        print_summary(project, Console())
    else:
        render_text(project, sys.stdout)

    exit_code = 0
    if getattr(args, "strict", False) and project.ambiguous:
        logger.error("%d ambiguous include(s) found", len(project.ambiguous))
        exit_code = EXIT_DIAGNOSTICS
    if getattr(args, "fail_on_unknown", False) and project.unknown_headers:
        logger.error("%d unknown header(s) found", len(project.unknown_headers))
        exit_code = EXIT_DIAGNOSTICS
    return exit_code


def print_summary(project: Project, console: Console) -> None:
    """Render one table row per component plus the diagnostic counts."""
    table = Table(title=f"Components in {project.root_path}")
    table.add_column("Component", style="bold")
    table.add_column("Type")
    table.add_column("Files", justify="right")
    table.add_column("Public deps")
    table.add_column("Private deps")
    table.add_column("Public includes")

    for component in sorted(project.components.real(), key=lambda c: c.root):
        table.add_row(
            component.root,
            component.type.value if component.type else "",
            str(len(component.files)),
            ", ".join(project.roots(component.pub_deps)),
            ", ".join(project.roots(component.priv_deps)),
            ", ".join(sorted(component.pub_incl)),
        )
    console.print(table)

    summary = project.summary()
    console.print(
        f"{summary['files']} files ({summary['compilation_units']} compilation units), "
        f"{summary['ambiguous_includes']} ambiguous includes, "
        f"{summary['unknown_headers']} unknown headers, "
        f"{summary['orphan_files']} files outside any component"
    )
