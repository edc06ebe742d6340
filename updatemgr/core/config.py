"""Typed loading of ``updatemgr.toml``.

The file is optional and lives at the distribution root:

    [paths]
    storage = "."
    indexes = "."

Both paths are relative to the distribution root unless absolute.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_table

__all__ = [
    "CONFIG_FILE_NAME",
    "Config",
    "ConfigError",
    "PathsConfig",
    "load_config",
    "load_config_or_default",
]

CONFIG_FILE_NAME = "updatemgr.toml"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class PathsConfig:
    """Locations within the distribution root."""

    storage: str = "."
    indexes: str = "."


@dataclass(frozen=True, slots=True)
class Config:
    paths: PathsConfig = field(default_factory=PathsConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from parsed TOML.

        Raises:
            TypeError: if a known key holds a non-string value.
        """
        paths: StrDict = get_table(data, "paths") or {}
        return cls(
            paths=PathsConfig(
                storage=_path_value(paths, "storage"),
                indexes=_path_value(paths, "indexes"),
            )
        )


def _path_value(table: Mapping[str, object], key: str) -> str:
    value = table.get(key)
    if value is None:
        return "."
    if not isinstance(value, str):
        raise TypeError(f"paths.{key} must be a string, got {type(value).__name__}")
    return value.strip() or "."


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    import tomllib

    try:
        data_obj: object = tomllib.loads(path.read_bytes().decode("utf-8"))
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(ConfigError("Config root must be a TOML table", path=path))
    return Ok(data)


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file."""
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_config_or_default(path: Path) -> Result[Config, ConfigError]:
    """Like load_config, but a missing file yields the default config.

    A file that exists and cannot be parsed is still an error.
    """
    if not path.exists():
        return Ok(Config())
    return load_config(path)
