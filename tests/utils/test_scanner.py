"""Tests for the source tree walker and path helpers."""

import os

from compdeps.utils.path_utils import join_relative, to_relative_posix
from compdeps.utils.scanner import is_blacklisted, is_code, walk_tree


def test_walk_tree_is_deterministic_and_directories_come_first(write_tree) -> None:
    root = write_tree(
        {
            "b/src/z.c": "",
            "a/include/a.h": "",
            "a/readme.txt": "",
            ".git/config": "",
            "a/.hidden.h": "",
        }
    )

    entries = list(walk_tree(root))

    assert entries == [
        ("a", True),
        ("b", True),
        ("a/include", True),
        ("a/readme.txt", False),
        ("a/include/a.h", False),
        ("b/src", True),
        ("b/src/z.c", False),
    ]
    assert entries == list(walk_tree(root))


def test_walk_tree_does_not_follow_directory_symlinks(write_tree) -> None:
    root = write_tree({"lib/include/lib/a.h": "", "lib/src/a.c": ""})
    os.symlink("..", root / "lib" / "up", target_is_directory=True)

    entries = list(walk_tree(root))

    assert ("lib/up", True) in entries
    assert [path for path, _ in entries if path.startswith("lib/up/")] == []
    assert [path for path, is_dir in entries if not is_dir] == [
        "lib/include/lib/a.h",
        "lib/src/a.c",
    ]


def test_blacklist_matches_prefix_or_name(write_tree) -> None:
    root = write_tree(
        {
            "third_party/src/x.c": "",
            "lib/src/gen.c": "",
            "lib/src/keep.c": "",
        }
    )

    files = [
        path
        for path, is_dir in walk_tree(root, ["third_party", "gen.c"])
        if not is_dir
    ]

    assert files == ["lib/src/keep.c"]
    assert is_blacklisted("out/obj/a.o", ["out"])
    assert not is_blacklisted("src/out.c", ["out"])


def test_code_extensions() -> None:
    assert is_code(".hpp")
    assert is_code(".inc")
    assert is_code(".mm")
    assert not is_code(".py")


def test_path_helpers() -> None:
    assert to_relative_posix("./lib/src/a.cpp") == "lib/src/a.cpp"
    assert join_relative("", "a.h") == "a.h"
    assert join_relative("lib/src", "./a.h") == "lib/src/a.h"
    assert join_relative("lib", "../../a.h") is None
    assert join_relative("lib", "/usr/include/a.h") is None
