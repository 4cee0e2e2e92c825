"""Main CLI entry point for compdeps.

Provides commands: scan, export, pipeline
"""

import argparse
import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from compdeps.cli.export import export_command
from compdeps.cli.pipeline import pipeline_command
from compdeps.cli.scan import scan_command

logger = logging.getLogger("compdeps.cli")


def setup_logging(
    verbose: bool = False,
    console: Optional[Console] = None,
    log_file: Optional[str] = None,
) -> None:
    """Setup logging configuration with Rich integration.

    Args:
        verbose: Enable verbose logging.
        console: Rich Console instance for coordinated output (optional).
        log_file: Also write log records to this file.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        log_time_format="[%H:%M:%S]",
    )
    handlers: list = [handler]

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
        except OSError as e:
            logger.warning("Failed to set up file logging: %s", e)
        else:
            file_handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
            )
            handlers.append(file_handler)

    logging.basicConfig(
        level=level,
        format="[%(name)s] %(message)s",
        handlers=handlers,
        force=True,
    )


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "root",
        nargs="?",
        default=".",
        help="Root of the source tree to analyze (default: current directory)",
    )
    parser.add_argument(
        "-c",
        "--config",
        help=(
            "Analyzer configuration. Can be a path to a TOML/JSON file or an "
            "inline TOML/JSON string. When omitted, <root>/compdeps.toml is "
            "used if present, otherwise built-in defaults."
        ),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="compdeps",
        description="Compdeps - component and include dependency analysis",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--log-file",
        help="Also write log output to this file",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    scan_parser = subparsers.add_parser(
        "scan",
        help="Scan a source tree and print its components and build pipeline",
    )
    _add_common_arguments(scan_parser)
    scan_parser.add_argument(
        "--summary",
        action="store_true",
        help="Print a summary table instead of the full component listing",
    )
    scan_parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 2 when ambiguous includes are found",
    )
    scan_parser.add_argument(
        "--fail-on-unknown",
        action="store_true",
        help="Exit with status 2 when unknown headers are found",
    )

    export_parser = subparsers.add_parser(
        "export",
        help="Export the dependency model to a file",
    )
    _add_common_arguments(export_parser)
    export_parser.add_argument(
        "-o",
        "--output",
        required=True,
        help="Output file",
    )
    export_parser.add_argument(
        "-f",
        "--format",
        choices=["json", "dot", "text"],
        default="json",
        help="Output format (default: json)",
    )

    pipeline_parser = subparsers.add_parser(
        "pipeline",
        help="Print the build pipeline and report dependency cycles",
    )
    _add_common_arguments(pipeline_parser)
    pipeline_parser.add_argument(
        "--limit",
        type=int,
        default=20,
        help="Maximum number of cycles to report (default: 20, <=0 for no limit)",
    )
    pipeline_parser.add_argument(
        "--fail-on-cycle",
        action="store_true",
        help="Exit with non-zero status when dependency cycles are found",
    )
    return parser


def main(argv: Optional[list] = None) -> int:
    """Main CLI entry point.

    Returns:
        int: Exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose, log_file=args.log_file)

    if args.command == "scan":
        return scan_command(args)
    elif args.command == "export":
        return export_command(args)
    elif args.command == "pipeline":
        return pipeline_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
