"""Test configuration and fixtures."""

from collections.abc import Generator
from datetime import date
from pathlib import Path

import fsspec
import pytest

from draftkit import drafts

FROZEN_DAY = date(2024, 3, 15)


@pytest.fixture(params=["file", "memory"])
def fs_impl(
    request: pytest.FixtureRequest,
    tmp_path: Path,
) -> Generator[tuple[fsspec.AbstractFileSystem, str]]:
    """Fixture to provide different fsspec filesystem implementations."""
    protocol = request.param
    if protocol == "file":
        fs = fsspec.filesystem("file")
        root = str(tmp_path / "test_root")
        yield fs, root
        # Cleanup handled by tmp_path
    else:
        fs = fsspec.filesystem("memory")
        root = f"/test_root_{tmp_path.name}"
        yield fs, root
        if fs.exists(root):
            fs.rm(root, recursive=True)


@pytest.fixture
def frozen_day(monkeypatch: pytest.MonkeyPatch) -> date:
    """Pin the scaffolder's clock to 2024-03-15."""
    monkeypatch.setattr(drafts, "today", lambda: FROZEN_DAY)
    return FROZEN_DAY
