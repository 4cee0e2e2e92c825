"""Global include-suffix lookup table.

Every file is reachable under each tail of its lowercased path that starts
right after a ``/``: ``lib/include/a/b.h`` answers to ``include/a/b.h``,
``a/b.h`` and ``b.h``. A tail claimed by two different files becomes
``INVALID`` for good, and the conflicting files are kept for reporting.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Set

from compdeps.core.model import SourceFile

logger = logging.getLogger("compdeps.analysis.lookup")

INVALID = "INVALID"


@dataclass
class LookupTable:
    """Suffix to path mapping plus the collisions found while building it."""

    suffix_to_path: Dict[str, str] = field(default_factory=dict)
    collisions: Dict[str, Set[str]] = field(default_factory=dict)

    def get(self, suffix: str) -> Optional[str]:
        """Return the real path, ``INVALID``, or None for an unknown suffix."""
        return self.suffix_to_path.get(suffix)

    def is_ambiguous(self, suffix: str) -> bool:
        return self.suffix_to_path.get(suffix) == INVALID

    def __len__(self) -> int:
        return len(self.suffix_to_path)


def path_suffixes(path: str) -> Iterable[str]:
    """Yield every tail of ``path`` that follows a ``/``, longest first.

    A leading ``/`` is not a separator.
    """
    pos = path.find("/", 1)
    while pos != -1:
        yield path[pos + 1 :]
        pos = path.find("/", pos + 1)


def build_lookup_table(files: Iterable[SourceFile]) -> LookupTable:
    """Build the suffix lookup table for all files.

    Args:
        files: Files of the project.

    Returns:
        LookupTable with ``INVALID`` entries for colliding suffixes.
    """
    table = LookupTable()
    mapping = table.suffix_to_path
    collisions = table.collisions

    for source in files:
        for suffix in path_suffixes(source.path.lower()):
            current = mapping.get(suffix)
            if current is None:
                mapping[suffix] = source.path
            elif current != source.path:
                conflicting = collisions.setdefault(suffix, set())
                conflicting.add(source.path)
                if current != INVALID:
                    conflicting.add(current)
                mapping[suffix] = INVALID

    logger.info(
        "Built include lookup table: %d suffixes, %d collisions",
        len(mapping),
        len(collisions),
    )
    return table


__all__ = ["INVALID", "LookupTable", "build_lookup_table", "path_suffixes"]
