"""Configuration schema and loading for compdeps."""

from .loader import DEFAULT_CONFIG_NAME, load_config
from .schema import DEFAULT_PREDEFINED_COMPONENTS, AnalyzerConfig

__all__ = [
    "AnalyzerConfig",
    "DEFAULT_CONFIG_NAME",
    "DEFAULT_PREDEFINED_COMPONENTS",
    "load_config",
]
