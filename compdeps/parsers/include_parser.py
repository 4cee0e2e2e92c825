"""Raw include extraction for C/C++/Objective-C sources.

Extracts ``#include`` directives using tree-sitter parsing with a regex
fallback. Only the directive text and its delimiter form are reported;
nothing is resolved here.
"""

import logging
import mmap
import os
import re
from pathlib import Path
from typing import List

from compdeps.core.model import RawInclude

logger = logging.getLogger("compdeps.parsers.include_parser")

# Try to import tree-sitter C bindings
_TREE_SITTER_AVAILABLE = True
try:
    import tree_sitter_c as tsc
    from tree_sitter import Language, Parser

    C_LANGUAGE = Language(tsc.language())
except (ImportError, AttributeError, TypeError, ValueError, OSError) as err:
    logger.debug("tree-sitter C import failed, falling back to regex: %s", err)
    _TREE_SITTER_AVAILABLE = False

# Regex fallback for #include directives
INCLUDE_RE = re.compile(
    r'^[ \t]*#[ \t]*include[ \t]*([<"])([^">\r\n]+)[">]', flags=re.MULTILINE
)
BLOCK_COMMENT_RE = re.compile(r"/\*.*?\*/", flags=re.DOTALL)


def _dedupe(includes: List[RawInclude]) -> List[RawInclude]:
    seen = set()
    unique = []
    for inc in includes:
        if inc not in seen:
            unique.append(inc)
            seen.add(inc)
    return unique


def _extract_with_regex(data: bytes) -> List[RawInclude]:
    text = data.decode("utf8", errors="ignore")
    text = BLOCK_COMMENT_RE.sub(" ", text)
    return [
        RawInclude(path.strip(), delim == "<")
        for delim, path in INCLUDE_RE.findall(text)
        if path.strip()
    ]


def _extract_with_tree_sitter(data: bytes) -> List[RawInclude]:
    parser = Parser(C_LANGUAGE)
    tree = parser.parse(data)

    includes: List[RawInclude] = []
    # Includes may sit inside #if/#ifdef blocks or extern "C" bodies.
    stack = [tree.root_node]
    while stack:
        node = stack.pop()
        if node.type == "preproc_include":
            path_node = node.child_by_field_name("path")
            if path_node is None or path_node.type not in (
                "system_lib_string",
                "string_literal",
            ):
                # Macro includes cannot be resolved without a preprocessor.
                continue
            try:
                text = path_node.text.decode("utf8").strip().strip('"<>').strip()
            except UnicodeDecodeError:
                continue
            if text:
                includes.append(RawInclude(text, path_node.type == "system_lib_string"))
            continue
        stack.extend(reversed(node.children))
    return includes


def extract_includes(data: bytes) -> List[RawInclude]:
    """Extract the ordered, de-duplicated include directives of a file.

    Args:
        data: Raw file contents.

    Returns:
        List of ``RawInclude(text, is_angle)`` in source order.
    """
    if not data:
        return []

    if _TREE_SITTER_AVAILABLE:
        try:
            includes = _extract_with_tree_sitter(data)
        except (ValueError, TypeError, RuntimeError, AttributeError) as exc:
            logger.debug("tree-sitter parse failed: %s, falling back to regex", exc)
            includes = _extract_with_regex(data)
    else:
        includes = _extract_with_regex(data)

    return _dedupe(includes)


def read_includes(file_path: Path) -> List[RawInclude]:
    """Read a file through a read-only memory map and extract its includes.

    The mapping is released before returning. Unreadable files are logged
    and treated as having no includes.
    """
    try:
        with open(file_path, "rb") as fh:
            if os.fstat(fh.fileno()).st_size == 0:
                return []
            with mmap.mmap(fh.fileno(), 0, access=mmap.ACCESS_READ) as view:
                includes = extract_includes(view[:])
    except (OSError, ValueError) as exc:
        logger.warning("Failed reading %s: %s", file_path, exc)
        return []

    logger.debug("Parsed %s: %d unique includes", file_path.name, len(includes))
    return includes
