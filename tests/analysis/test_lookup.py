"""Tests for the include suffix lookup table."""

from compdeps.analysis.lookup import INVALID, build_lookup_table, path_suffixes
from compdeps.core.model import FileTable


def _files(*paths: str) -> FileTable:
    table = FileTable()
    for path in paths:
        table.create(path, 0)
    return table


def test_path_suffixes_follow_each_separator() -> None:
    assert list(path_suffixes("a/b/c.h")) == ["b/c.h", "c.h"]
    assert list(path_suffixes("top.h")) == []
    assert list(path_suffixes("/abs/x.h")) == ["x.h"]


def test_unique_file_reachable_under_every_suffix() -> None:
    lookup = build_lookup_table(_files("libfoo/include/Foo.h"))

    assert lookup.get("include/foo.h") == "libfoo/include/Foo.h"
    assert lookup.get("foo.h") == "libfoo/include/Foo.h"
    assert lookup.get("libfoo/include/foo.h") is None
    assert lookup.collisions == {}


def test_collision_marks_suffix_invalid_and_records_both_paths() -> None:
    lookup = build_lookup_table(_files("a/x/h.h", "a/y/h.h"))

    assert lookup.get("h.h") == INVALID
    assert lookup.is_ambiguous("h.h")
    assert lookup.collisions["h.h"] == {"a/x/h.h", "a/y/h.h"}
    # Longer suffixes stay unique.
    assert lookup.get("x/h.h") == "a/x/h.h"
    assert lookup.get("y/h.h") == "a/y/h.h"


def test_invalid_entry_is_never_repaired() -> None:
    lookup = build_lookup_table(_files("a/x/h.h", "a/y/h.h", "b/z/h.h"))

    assert lookup.get("h.h") == INVALID
    assert lookup.collisions["h.h"] == {"a/x/h.h", "a/y/h.h", "b/z/h.h"}
    assert INVALID not in lookup.collisions["h.h"]


def test_case_only_difference_collides() -> None:
    lookup = build_lookup_table(_files("p/Util.h", "q/util.h"))

    assert lookup.get("util.h") == INVALID
    assert lookup.collisions["util.h"] == {"p/Util.h", "q/util.h"}
