"""Parsers package.

Include extraction and the known-header classifier live here.
"""

from compdeps.parsers.include_parser import extract_includes, read_includes
from compdeps.parsers.known_headers import KnownHeaders

__all__ = ["KnownHeaders", "extract_includes", "read_includes"]
