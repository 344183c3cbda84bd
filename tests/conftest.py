"""Pytest configuration and fixtures."""

import gc
import shutil
import tempfile
import time
from collections.abc import Generator
from pathlib import Path

import pytest

from zippack.app import PackService
from zippack.app.adapters import FileSystemStorageAdapter, ZipArchiveCodec
from zippack.config import PackOptions, Settings


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    try:
        yield Path(tmpdir)
    finally:
        # Force garbage collection to release any file handles
        gc.collect()
        # Small delay to allow OS to release file locks
        time.sleep(0.1)
        shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def dist_dir(temp_dir: Path) -> Path:
    """Create a small build output tree."""
    dist = temp_dir / "dist"
    dist.mkdir()
    (dist / "a.js").write_text("a")
    (dist / "b.ts").write_text("b")
    (dist / "package.json").write_text('{"p":"p"}')
    assets = dist / "assets"
    assets.mkdir()
    (assets / "c.txt").write_text("c")
    return dist


@pytest.fixture
def pack_service() -> PackService:
    """PackService wired to the real filesystem and ZIP codec."""
    return PackService(storage_port=FileSystemStorageAdapter(), archive_port=ZipArchiveCodec())


@pytest.fixture
def pack_options(dist_dir: Path) -> PackOptions:
    """Options that write ``out.zip`` next to the input files."""
    return PackOptions(in_dir=str(dist_dir), out_dir=str(dist_dir), out_file_name="out.zip")


@pytest.fixture
def override_settings(temp_dir: Path) -> Generator[Settings, None, None]:
    """Provide isolated zippack settings scoped to tests."""

    import zippack.config as config_module

    original_settings = getattr(config_module, "_settings", None)

    settings = config_module.Settings(
        in_dir=str(temp_dir / "dist"),
        out_dir=str(temp_dir / "dist-zip"),
        out_file_name="dist.zip",
        path_prefix=None,
    )
    config_module._settings = settings

    try:
        yield settings
    finally:
        config_module._settings = original_settings


