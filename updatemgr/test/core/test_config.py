"""Tests for updatemgr.core.config module."""

from __future__ import annotations

from pathlib import Path

from updatemgr.core.config import Config, PathsConfig, load_config, load_config_or_default
from updatemgr.core.errors import ErrorCode
from updatemgr.core.result import Err, Ok


class TestConfigFromDict:
    def test_defaults(self) -> None:
        config = Config.from_dict({})
        assert config.paths == PathsConfig(storage=".", indexes=".")

    def test_paths(self) -> None:
        config = Config.from_dict({"paths": {"storage": "files", "indexes": " idx "}})
        assert config.paths.storage == "files"
        assert config.paths.indexes == "idx"

    def test_blank_value_falls_back_to_root(self) -> None:
        config = Config.from_dict({"paths": {"storage": "  "}})
        assert config.paths.storage == "."


class TestLoadConfig:
    def test_valid_file(self, tmp_path: Path) -> None:
        path = tmp_path / "updatemgr.toml"
        path.write_text('[paths]\nstorage = "files"\n', encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Ok)
        assert result.value.paths.storage == "files"
        assert result.value.paths.indexes == "."

    def test_missing_file(self, tmp_path: Path) -> None:
        result = load_config(tmp_path / "missing.toml")
        assert isinstance(result, Err)
        assert "not found" in result.error.message

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "updatemgr.toml"
        path.write_text("[paths\n", encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Err)
        assert "Invalid TOML" in result.error.message
        assert result.error.path == path

    def test_wrong_type(self, tmp_path: Path) -> None:
        path = tmp_path / "updatemgr.toml"
        path.write_text("[paths]\nstorage = 3\n", encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Err)
        assert "paths.storage must be a string" in result.error.message


class TestLoadConfigOrDefault:
    def test_missing_file_is_default(self, tmp_path: Path) -> None:
        assert load_config_or_default(tmp_path / "updatemgr.toml") == Ok(Config())

    def test_broken_file_is_still_an_error(self, tmp_path: Path) -> None:
        path = tmp_path / "updatemgr.toml"
        path.write_text("not toml at all ===", encoding="utf-8")
        assert isinstance(load_config_or_default(path), Err)


def test_error_codes_are_stable() -> None:
    assert [int(c) for c in ErrorCode] == [0, 1, 2, 3, 4, 5]
