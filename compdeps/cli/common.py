"""Helpers shared by CLI commands."""

import json
import logging
import tomllib
from pathlib import Path

from pydantic import ValidationError

from compdeps.config import load_config
from compdeps.project import Project

logger = logging.getLogger("compdeps.cli.common")

RECOVERABLE_CLI_ERRORS = (
    json.JSONDecodeError,
    tomllib.TOMLDecodeError,
    ValidationError,
    OSError,
    RuntimeError,
    TypeError,
    ValueError,
)


def load_project(args) -> Project:
    """Build and scan a Project from parsed command-line arguments.

    Raises:
        NotADirectoryError: If the root is not a directory.
        ValidationError: If the configuration is invalid.
    """
    root = Path(getattr(args, "root", ".") or ".").expanduser().resolve()
    if not root.is_dir():
        raise NotADirectoryError(f"Not a directory: {root}")

    config = load_config(getattr(args, "config", None), project_root=root)
    logger.debug("Configuration: %s", config.to_dict())
    return Project(root, config)
