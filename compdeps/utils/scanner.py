"""Deterministic source tree walker using scandir and generator pattern."""

import logging
import os
import posixpath
from pathlib import Path
from typing import Generator, List, Optional, Sequence, Tuple

from compdeps.core.model import CODE_EXTENSIONS

logger = logging.getLogger("compdeps.utils.scanner")


def is_code(ext: str) -> bool:
    """Return True for extensions of C/C++/Objective-C sources and headers."""
    return ext in CODE_EXTENSIONS


def is_hidden(name: str) -> bool:
    return len(name) >= 2 and name.startswith(".")


def is_blacklisted(rel_path: str, blacklist: Sequence[str]) -> bool:
    """Check a repository-relative path against the configured blacklist.

    An entry matches when the path starts with it, or when it equals the
    entry's final name.
    """
    name = posixpath.basename(rel_path)
    for entry in blacklist:
        if rel_path.startswith(entry):
            return True
        if entry == name:
            return True
    return False


def walk_tree(
    root_path: Path,
    blacklist: Optional[Sequence[str]] = None,
) -> Generator[Tuple[str, bool], None, None]:
    """Walk ``root_path`` depth-first.

    Hidden and blacklisted entries are skipped and never descended into.
    Symlinked directories are yielded but not followed.
    Entries of a directory are yielded in name order, and a directory is
    always yielded before anything below it.

    Args:
        root_path: Root directory to scan.
        blacklist: Path prefixes or names to skip.

    Yields:
        ``(relative_posix_path, is_directory)`` pairs.
    """
    root_path = Path(root_path)
    blacklist = list(blacklist or [])
    stack: List[Tuple[Path, str]] = [(root_path, "")]

    while stack:
        current_dir, rel_dir = stack.pop()

        try:
            entries = sorted(os.scandir(current_dir), key=lambda e: e.name)
        except (PermissionError, FileNotFoundError, NotADirectoryError) as exc:
            logger.warning("Cannot list %s: %s", current_dir, exc)
            continue

        subdirs: List[Tuple[Path, str]] = []
        for entry in entries:
            rel_path = f"{rel_dir}/{entry.name}" if rel_dir else entry.name
            if is_hidden(entry.name) or is_blacklisted(rel_path, blacklist):
                logger.debug("Skipping %s", rel_path)
                continue
            try:
                if entry.is_dir():
                    if not entry.is_symlink():
                        subdirs.append((Path(entry.path), rel_path))
                    yield rel_path, True
                elif entry.is_file():
                    yield rel_path, False
            except OSError as exc:
                logger.debug("Cannot stat %s: %s", rel_path, exc)

        # Reversed so the stack pops subdirectories in name order.
        stack.extend(reversed(subdirs))
