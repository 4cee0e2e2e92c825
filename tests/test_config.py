"""Tests for configuration models and loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from compdeps.config import AnalyzerConfig, load_config


def test_defaults() -> None:
    config = load_config(None)

    assert config.blacklist == []
    assert config.package_roots == ["packages"]
    assert config.predefined_components["sdl2/sdl.h"] == "SDL2"
    assert config.is_package_root("packages/zlib")
    assert not config.is_package_root("src/packages")


def test_predefined_keys_are_lowercased_and_blacklist_normalized() -> None:
    config = AnalyzerConfig.from_dict(
        {"predefined_components": {"Vulkan/Vulkan.h": "Vulkan"}, "blacklist": ["./third_party\\old"]}
    )

    assert config.predefined_components == {"vulkan/vulkan.h": "Vulkan"}
    assert config.blacklist == ["third_party/old"]


def test_load_toml_file(tmp_path: Path) -> None:
    path = tmp_path / "settings.toml"
    path.write_text('blacklist = ["build"]\npackage_roots = ["vendor"]\n', encoding="utf-8")

    config = load_config(path)

    assert config.blacklist == ["build"]
    assert config.is_package_root("vendor/lib")


def test_load_inline_json() -> None:
    config = load_config('{"known_headers": ["gtest/gtest.h"]}')

    assert config.known_headers == ["gtest/gtest.h"]


def test_default_file_in_project_root(tmp_path: Path) -> None:
    (tmp_path / "compdeps.toml").write_text('blacklist = ["out"]\n', encoding="utf-8")

    assert load_config(None, project_root=tmp_path).blacklist == ["out"]


def test_invalid_configuration_is_rejected() -> None:
    with pytest.raises(ValidationError):
        AnalyzerConfig.from_dict({"unknown_option": True})
    with pytest.raises(ValidationError):
        AnalyzerConfig.from_dict({"blacklist": [""]})
    with pytest.raises(ValueError):
        load_config("[1, 2]")
    with pytest.raises(TypeError):
        load_config(42)
