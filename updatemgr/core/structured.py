"""Helpers for reading untyped TOML/JSON structures.

Used at the boundaries where updatemgr.toml and index files are parsed.
"""

from __future__ import annotations

from typing import Mapping, TypeGuard, cast

StrDict = dict[str, object]


def is_str_dict(obj: object) -> TypeGuard[StrDict]:
    """Return True if obj is a dict with string keys."""
    if not isinstance(obj, dict):
        return False
    d = cast(dict[object, object], obj)
    return all(isinstance(k, str) for k in d.keys())


def as_str_dict(obj: object) -> StrDict | None:
    if is_str_dict(obj):
        return obj
    return None


def as_str_map(obj: object) -> dict[str, str] | None:
    """Return obj as a string-to-string dict, or None if any value is not a str."""
    d = as_str_dict(obj)
    if d is None:
        return None
    out: dict[str, str] = {}
    for key, value in d.items():
        if not isinstance(value, str):
            return None
        out[key] = value
    return out


def get_table(table: Mapping[str, object], key: str) -> StrDict | None:
    """Get a nested table (dict with string keys)."""
    return as_str_dict(table.get(key))
