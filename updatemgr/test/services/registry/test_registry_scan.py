from __future__ import annotations

from pathlib import Path

import pytest

from updatemgr.core.result import Err, Ok
from updatemgr.services.registry.model import VersionEntry
from updatemgr.services.registry.scan import Registry, load_registry, split_versioned_name
from updatemgr.services.registry.semver import SemVer


def _load(root: Path) -> Registry:
    result = load_registry(root)
    assert isinstance(result, Ok)
    return result.value


def test_split_versioned_name() -> None:
    assert split_versioned_name("portmaster-core_v0-9-2-beta.zip") == (
        "portmaster-core.zip",
        SemVer(0, 9, 2, "beta"),
    )
    assert split_versioned_name("core_v1-0-0") == ("core", SemVer(1, 0, 0))
    assert split_versioned_name("tool_v0-2-0.tar.gz") == ("tool.tar.gz", SemVer(0, 2, 0))


def test_split_versioned_name_ignores_unversioned() -> None:
    assert split_versioned_name("stable.json") is None
    assert split_versioned_name("notes_v1.md") is None


def test_load_registry_groups_versions(dist_dir: Path) -> None:
    result = load_registry(dist_dir)
    assert isinstance(result, Ok)
    registry = result.value

    registry.select_versions()
    export = registry.export()

    assert [c.identifier for c in export] == [
        "all/core/core",
        "all/ui/app.zip",
        "linux/tool/tool.tar.gz",
    ]
    app = export[1]
    assert [v.version_number for v in app.versions] == ["2.0.0", "1.5.0-beta", "1.4.0"]
    assert app.versions[0].path == dist_dir / "all/ui/app_v2-0-0.zip"


def test_load_registry_orders_prerelease_below_release(dist_dir: Path) -> None:
    registry = _load(dist_dir)
    registry.select_versions()
    tool = registry.export()[2]
    assert [v.version_number for v in tool.versions] == ["0.3.0-beta", "0.2.0", "0.2.0-staging"]


def test_load_registry_skips_hidden_and_unversioned(dist_dir: Path) -> None:
    (dist_dir / "stable.json").write_text("{}", encoding="utf-8")
    (dist_dir / "updatemgr.toml").write_text("", encoding="utf-8")
    hidden = dist_dir / ".git"
    hidden.mkdir()
    (hidden / "obj_v1-0-0").write_bytes(b"")
    (dist_dir / ".tmp_v9-9-9").write_bytes(b"")

    registry = _load(dist_dir)

    assert len(registry) == 3


def test_load_registry_missing_dir(tmp_path: Path) -> None:
    result = load_registry(tmp_path / "missing")
    assert isinstance(result, Err)
    assert result.error.kind == "registry_failed"


def test_export_requires_select(tmp_path: Path) -> None:
    registry = Registry()
    registry.add("a", VersionEntry.parse("1.0.0", tmp_path / "a_v1-0-0"))
    with pytest.raises(RuntimeError, match="select_versions"):
        registry.export()


def test_select_versions_is_idempotent(dist_dir: Path) -> None:
    registry = _load(dist_dir)
    registry.select_versions()
    first = registry.export()
    registry.select_versions()
    assert registry.export() == first


def test_version_entry_parse_rejects_garbage(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="invalid version"):
        VersionEntry.parse("latest", tmp_path / "x")
