"""Path normalization utilities for repository-relative paths.

All paths in the model are POSIX-style and relative to the scanned root,
without a leading ``./``.
"""

import posixpath
from pathlib import Path
from typing import Optional, Union


def to_relative_posix(path: Union[Path, str], root_path: Optional[Path] = None) -> str:
    """Normalize a path to the repository-relative POSIX form.

    Examples:
        >>> to_relative_posix("./lib/src/a.cpp")
        'lib/src/a.cpp'
        >>> to_relative_posix(Path("/work/repo/lib/a.h"), Path("/work/repo"))
        'lib/a.h'
    """
    if root_path is not None:
        path = Path(path).relative_to(root_path)
    text = str(path).replace("\\", "/")
    while text.startswith("./"):
        text = text[2:]
    return text.rstrip("/")


def join_relative(base_dir: str, include_text: str) -> Optional[str]:
    """Resolve ``include_text`` against ``base_dir``.

    Returns None when the result would leave the repository root or the
    include is absolute.

    Examples:
        >>> join_relative("lib/src", "a.h")
        'lib/src/a.h'
        >>> join_relative("lib/src", "../include/a.h")
        'lib/include/a.h'
        >>> join_relative("lib", "../../x.h") is None
        True
    """
    include_text = include_text.replace("\\", "/")
    if include_text.startswith("/"):
        return None
    joined = posixpath.normpath(posixpath.join(base_dir, include_text))
    if joined == ".." or joined.startswith("../"):
        return None
    return joined


def first_segment(path: str) -> str:
    return path.split("/", 1)[0]


def last_segment(path: str) -> str:
    return path.rstrip("/").rsplit("/", 1)[-1]
