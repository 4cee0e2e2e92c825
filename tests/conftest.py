"""Shared fixtures for compdeps tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict

import pytest

from compdeps.core.model import ComponentTable, FileTable, RawInclude


@pytest.fixture
def write_tree(tmp_path: Path) -> Callable[[Dict[str, str]], Path]:
    """Return a helper that materializes ``{relative_path: content}`` under tmp_path.

    Paths ending in ``/`` create empty directories.
    """

    def _write(files: Dict[str, str]) -> Path:
        for rel_path, content in files.items():
            target = tmp_path / rel_path
            if rel_path.endswith("/"):
                target.mkdir(parents=True, exist_ok=True)
                continue
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        return tmp_path

    return _write


class TableBuilder:
    """Build file and component tables without touching the filesystem."""

    def __init__(self) -> None:
        self.files = FileTable()
        self.components = ComponentTable()

    def component(self, root: str):
        return self.components.create(root)

    def file(self, path: str, *includes: RawInclude):
        owner = self.components.owner_of(path)
        assert owner is not None, f"no component owns {path}"
        source = self.files.create(path, owner.id, includes)
        owner.files.add(source.id)
        return source


@pytest.fixture
def tables() -> TableBuilder:
    return TableBuilder()
