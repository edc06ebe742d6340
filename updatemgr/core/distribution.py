"""Distribution root detection and paths.

The distribution root is the directory that holds the versioned files
(the storage root) and the published ``<channel>.json`` indexes. By default
both are the root itself; ``updatemgr.toml`` can move either.

Resolution order for the root:
1. explicit ``--dir`` option
2. ``UPDATEMGR_DIR`` environment variable
3. current working directory
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from .config import CONFIG_FILE_NAME, Config, load_config_or_default
from .result import Err, Ok, Result

__all__ = [
    "DIR_ENV_VAR",
    "Distribution",
    "DistributionError",
    "DistributionSource",
    "detect_distribution",
]

DIR_ENV_VAR = "UPDATEMGR_DIR"

DistributionSource = Literal["option", "env", "cwd"]


@dataclass(frozen=True, slots=True)
class DistributionError:
    message: str
    hint: str | None = None


@dataclass(frozen=True, slots=True)
class Distribution:
    root: Path
    config: Config
    source: DistributionSource = "cwd"

    @property
    def storage_dir(self) -> Path:
        """Registry root: where versioned files are scanned."""
        return self._resolve(self.config.paths.storage)

    @property
    def index_dir(self) -> Path:
        """Where channel indexes are written."""
        return self._resolve(self.config.paths.indexes)

    def _resolve(self, value: str) -> Path:
        p = Path(value).expanduser()
        if p.is_absolute():
            return p
        return (self.root / p).resolve()


def _candidate_root(explicit: Path | None) -> tuple[Path, DistributionSource]:
    if explicit is not None:
        return explicit, "option"
    env = os.environ.get(DIR_ENV_VAR)
    if env:
        return Path(env), "env"
    return Path.cwd(), "cwd"


def detect_distribution(explicit: Path | None = None) -> Result[Distribution, DistributionError]:
    """Resolve the distribution root and load its optional config."""
    candidate, source = _candidate_root(explicit)
    try:
        root = candidate.expanduser().resolve()
    except OSError as e:
        return Err(DistributionError(f"invalid distribution directory: {e}"))

    if not root.is_dir():
        return Err(
            DistributionError(
                f"distribution directory not found: {root}",
                hint=f"pass --dir or set {DIR_ENV_VAR}",
            )
        )

    config = load_config_or_default(root / CONFIG_FILE_NAME)
    if isinstance(config, Err):
        return Err(DistributionError(config.error.message, hint=str(config.error.path)))

    return Ok(Distribution(root=root, config=config.value, source=source))
