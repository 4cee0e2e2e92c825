"""Helpers for loading analyzer configuration from TOML/JSON sources.

This module provides a single entry point `load_config` that accepts
various configuration sources:

* None -> default AnalyzerConfig
* dict -> AnalyzerConfig.from_dict
* Path / path-like string -> load .toml/.json from filesystem
* Inline JSON/TOML strings

When no source is given, a ``compdeps.toml`` in the scanned root is
picked up if present.
"""

from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Union

from compdeps.config.schema import AnalyzerConfig

logger = logging.getLogger("compdeps.config.loader")

ConfigSource = Union[str, Path, Dict[str, Any], None]

DEFAULT_CONFIG_NAME = "compdeps.toml"


def _detect_format(text: str) -> str:
    stripped = text.lstrip()
    return "json" if stripped.startswith(("{", "[")) else "toml"


def load_config(
    source: ConfigSource, project_root: Optional[Path] = None
) -> AnalyzerConfig:
    """Load AnalyzerConfig from various configuration sources.

    Args:
        source: One of:
            * None: ``<project_root>/compdeps.toml`` when it exists,
              otherwise the defaults
            * dict: treated as already-parsed configuration mapping
            * str/Path: either a filesystem path to a .toml/.json file,
              or an inline TOML/JSON string (auto-detected)
        project_root: Root of the scanned tree, used for the default file.

    Returns:
        AnalyzerConfig instance.
    """
    if source is None:
        if project_root is not None and (project_root / DEFAULT_CONFIG_NAME).is_file():
            source = project_root / DEFAULT_CONFIG_NAME
        else:
            logger.debug("No config source provided; using default AnalyzerConfig")
            return AnalyzerConfig.default()

    if isinstance(source, dict):
        logger.debug("Loading AnalyzerConfig from provided dict")
        return AnalyzerConfig.from_dict(source)

    if isinstance(source, (str, Path)):
        path = Path(source)
        text: Optional[str] = None
        fmt: Optional[str] = None

        try:
            is_file = path.is_file()
        except OSError:
            # Inline text can exceed the platform path length limit.
            is_file = False

        if is_file:
            text = path.read_text(encoding="utf-8")
            suffix = path.suffix.lower()
            if suffix in {".toml", ".tml"}:
                fmt = "toml"
            elif suffix == ".json":
                fmt = "json"
            else:
                fmt = _detect_format(text)
            logger.info("Loading configuration from file: %s (fmt=%s)", path, fmt)
        else:
            text = str(source)
            fmt = _detect_format(text)
            logger.info("Loading configuration from inline %s string", fmt)

        if fmt == "json":
            data = json.loads(text)
        else:
            data = tomllib.loads(text)

        if not isinstance(data, dict):
            raise ValueError("Top-level configuration must be a mapping/dict")

        return AnalyzerConfig.from_dict(data)

    raise TypeError(f"Unsupported config source type: {type(source)!r}")


__all__ = ["load_config", "DEFAULT_CONFIG_NAME"]
