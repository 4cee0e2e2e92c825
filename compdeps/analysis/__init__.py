"""Include resolution and dependency inference phases."""

from compdeps.analysis.extractor import (
    classify_component,
    extract_include_paths,
    extract_public_dependencies,
)
from compdeps.analysis.lookup import INVALID, LookupTable, build_lookup_table
from compdeps.analysis.resolver import IncludeResolver, include_path_fragment
from compdeps.analysis.visibility import propagate_external_includes

__all__ = [
    "INVALID",
    "IncludeResolver",
    "LookupTable",
    "build_lookup_table",
    "classify_component",
    "extract_include_paths",
    "extract_public_dependencies",
    "include_path_fragment",
    "propagate_external_includes",
]
