"""Export command implementation."""

import logging
from pathlib import Path

from compdeps.cli.common import RECOVERABLE_CLI_ERRORS, load_project
from compdeps.export import export_dot, export_json, render_text

logger = logging.getLogger("compdeps.cli.export")


def export_command(args) -> int:
    """Execute export command.

    Args:
        args: Parsed command-line arguments.

    Returns:
        int: Exit code.
    """
    try:
        project = load_project(args)
        output_path = Path(args.output)
        fmt = getattr(args, "format", "json")

        if fmt == "json":
            export_json(project, output_path)
        elif fmt == "dot":
            if not export_dot(project, output_path):
                return 1
        elif fmt == "text":
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, "w", encoding="utf-8") as f:
                render_text(project, f)
        else:
            logger.error("Unsupported export format: %s", fmt)
            return 1

        logger.info("Exported %s to %s", fmt, output_path)
        return 0

    except RECOVERABLE_CLI_ERRORS as e:
        logger.error("Export failed: %s", e)
        return 1
