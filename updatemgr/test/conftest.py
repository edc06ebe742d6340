from __future__ import annotations

from pathlib import Path

import pytest


def touch(root: Path, rel: str) -> Path:
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"payload")
    return path


@pytest.fixture
def dist_dir(tmp_path: Path) -> Path:
    """A distribution directory with stable, beta and staging versions.

    all/ui/app:       2.0.0, 1.5.0-beta, 1.4.0
    all/core/core:    1.0.0
    linux/tool/tool:  0.3.0-beta, 0.2.0-staging, 0.2.0
    """
    root = tmp_path / "dist"
    root.mkdir()
    for rel in (
        "all/ui/app_v2-0-0.zip",
        "all/ui/app_v1-5-0-beta.zip",
        "all/ui/app_v1-4-0.zip",
        "all/core/core_v1-0-0",
        "linux/tool/tool_v0-3-0-beta.tar.gz",
        "linux/tool/tool_v0-2-0-staging.tar.gz",
        "linux/tool/tool_v0-2-0.tar.gz",
    ):
        touch(root, rel)
    return root
