"""End-to-end tests for Project scans over small source trees."""

from __future__ import annotations

import os

from compdeps.analysis.lookup import INVALID
from compdeps.config import AnalyzerConfig
from compdeps.core.model import ComponentType
from compdeps.project import Project

LIBFOO_TREE = {
    "libfoo/include/foo.h": "#pragma once\nint foo(void);\n",
    "libfoo/src/foo.cpp": '#include "foo.h"\nint foo(void) { return 1; }\n',
    "app/src/": "",
    "app/main.cpp": "#include <foo.h>\nint main(void) { return foo(); }\n",
}


def _snapshot(project: Project) -> dict:
    return {
        "components": {
            c.root: (
                c.type,
                tuple(project.roots(c.pub_deps)),
                tuple(project.roots(c.priv_deps)),
                tuple(sorted(c.pub_incl)),
                tuple(sorted(c.priv_incl)),
            )
            for c in project.components
        },
        "files": {f.path: tuple(project.dependencies_of(f.path)) for f in project.files},
    }


def test_library_and_consumer_scenario(write_tree) -> None:
    root = write_tree(LIBFOO_TREE)

    project = Project(root)

    libfoo = project.component("libfoo")
    app = project.component("app")
    header = project.file("libfoo/include/foo.h")

    assert libfoo.type is ComponentType.LIBRARY
    assert app.type is ComponentType.EXECUTABLE
    assert header.has_external_include
    assert project.lookup.get("foo.h") == "libfoo/include/foo.h"
    assert libfoo.id in app.priv_deps | app.pub_deps
    assert project.dependencies_of("app/main.cpp") == ["libfoo/include/foo.h"]
    assert project.dependencies_of("libfoo/src/foo.cpp") == ["libfoo/include/foo.h"]
    assert libfoo.pub_incl == {"include"}
    assert project.unknown_headers == set()
    assert project.ambiguous == {}


def test_reload_is_idempotent(write_tree) -> None:
    root = write_tree(LIBFOO_TREE)
    project = Project(root)
    first = _snapshot(project)

    project.reload()

    assert _snapshot(project) == first


def test_nested_test_component_owns_its_files(write_tree) -> None:
    root = write_tree(
        {
            "a/include/a.h": "",
            "a/src/a.cpp": '#include "a.h"\n',
            "a/test/a_test.cpp": "#include <a.h>\n",
        }
    )

    project = Project(root)
    test_comp = project.component("a/test")
    lib = project.component("a")

    assert project.component_of(project.file("a/test/a_test.cpp")) is test_comp
    assert test_comp.type is ComponentType.UNITTEST
    assert lib.type is ComponentType.LIBRARY
    assert lib.id in test_comp.priv_deps | test_comp.pub_deps


def test_public_dependency_through_exposed_header(write_tree) -> None:
    root = write_tree(
        {
            "base/include/base/types.h": "",
            "base/src/types.cpp": "#include <base/types.h>\n",
            "net/include/net/socket.h": "#include <base/types.h>\n",
            "net/src/socket.cpp": "#include <net/socket.h>\n#include <base/types.h>\n",
            "server/src/main.cpp": "#include <net/socket.h>\n",
        }
    )

    project = Project(root)
    base = project.component("base")
    net = project.component("net")
    server = project.component("server")

    assert net.pub_deps == {base.id}
    assert net.priv_deps == set()
    assert server.priv_deps == {net.id}
    assert server.pub_deps == set()
    assert server.type is ComponentType.EXECUTABLE
    assert net.pub_incl == {"include"}
    assert base.pub_incl == {"include"}


def test_collisions_are_reported_not_resolved(write_tree) -> None:
    root = write_tree(
        {
            "a/x/src/": "",
            "a/x/h.h": "",
            "b/src/h.h": "",
            "app/src/main.cpp": "#include <h.h>\n",
        }
    )

    project = Project(root)

    assert project.lookup.get("h.h") == INVALID
    assert project.collisions["h.h"] == {"a/x/h.h", "b/src/h.h"}
    assert project.ambiguous == {"h.h": ["app/src/main.cpp"]}
    assert project.dependencies_of("app/src/main.cpp") == []


def test_local_include_wins_over_tree_wide_name(write_tree) -> None:
    root = write_tree(
        {
            "lib/src/a.cpp": '#include "a.h"\n',
            "lib/src/a.h": "",
            "other/src/a.h": "",
        }
    )

    project = Project(root)

    assert project.dependencies_of("lib/src/a.cpp") == ["lib/src/a.h"]
    assert project.ambiguous == {}


def test_orphans_hidden_and_blacklisted_entries(write_tree) -> None:
    root = write_tree(
        {
            "stray.c": "",
            "lib/src/a.c": "#include <zlib_missing.h>\n",
            "lib/.cache/ignored.h": "",
            "build/src/generated.c": "",
            "lib/src/skip_me.c": "",
        }
    )
    config = AnalyzerConfig(blacklist=["build", "skip_me.c"])

    project = Project(root, config)

    assert project.orphans == ["stray.c"]
    assert sorted(f.path for f in project.files) == ["lib/src/a.c"]
    assert project.component("build") is None
    assert project.unknown_headers == {"zlib_missing.h"}


def test_predefined_and_package_components(write_tree) -> None:
    root = write_tree(
        {
            "packages/zlib/src/zlib.c": "",
            "game/src/main.cpp": "#include <SDL2/SDL.h>\n#include <GL/glew.h>\n",
        }
    )

    project = Project(root)
    game = project.component("game")

    assert project.component("packages/zlib").type is ComponentType.LIBRARY
    assert project.roots(game.priv_deps) == ["external:GLEW", "external:SDL2"]
    assert project.unknown_headers == set()
    summary = project.summary()
    assert summary["components"] == 2
    assert summary["component_types"]["library"] == 1
    assert summary["files"] == 2


def test_component_invariants_hold(write_tree) -> None:
    root = write_tree(
        {
            "core/include/core.h": "",
            "core/src/core.cpp": '#include "core.h"\n#include <util.h>\n',
            "util/include/util.h": "#include <core.h>\n",
            "util/src/util.cpp": "#include <util.h>\n",
        }
    )

    project = Project(root)

    for component in project.components.real():
        assert not component.priv_deps & component.pub_deps
        assert component.id not in component.priv_deps | component.pub_deps
        assert not component.priv_incl & component.pub_incl
    for source in project.files:
        assert source.id in project.component_of(source).files


def test_directory_symlink_does_not_duplicate_files(write_tree) -> None:
    root = write_tree(
        {
            "lib/include/lib/a.h": "int a(void);\n",
            "lib/src/a.c": '#include "lib/a.h"\n',
            "app/src/main.c": "#include <lib/a.h>\n",
        }
    )
    os.symlink("..", root / "lib" / "up", target_is_directory=True)

    project = Project(root)

    assert len(project.files) == 3
    assert project.ambiguous == {}
    assert project.component("lib/up") is None
    assert project.dependencies_of("app/src/main.c") == ["lib/include/lib/a.h"]
    assert project.roots(project.component("app").priv_deps) == ["lib"]
