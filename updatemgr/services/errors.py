from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

UpdateErrorKind = Literal[
    "invalid_input",
    "config_invalid",
    "registry_failed",
    "serialize_failed",
    "write_failed",
    "delete_failed",
    "read_failed",
]


@dataclass(frozen=True, slots=True)
class UpdateError:
    """Error payload shared by the registry, index and prune services."""

    kind: UpdateErrorKind
    message: str
    hint: str | None = None
