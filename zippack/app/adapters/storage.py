"""Filesystem-backed storage port implementation."""

from __future__ import annotations

import os
from pathlib import Path

from zippack.app.ports import FileSystemEntry, StoragePort


class FileSystemStorageAdapter(StoragePort):
    """Adapter that performs direct filesystem operations."""

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def is_dir(self, path: Path) -> bool:
        return Path(path).is_dir()

    def is_absolute(self, path: Path | str) -> bool:
        return os.path.isabs(path)

    def join(self, *parts: Path | str) -> Path:
        return Path(*parts)

    def make_dirs(self, path: Path) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)

    def list_dir(self, path: Path) -> list[str]:
        return os.listdir(path)

    def stat(self, path: Path) -> FileSystemEntry:
        entry_path = Path(path)
        info = entry_path.stat()
        return FileSystemEntry(
            name=entry_path.name,
            path=entry_path,
            is_dir=entry_path.is_dir(),
            mtime=info.st_mtime,
        )

    def read_bytes(self, path: Path) -> bytes:
        return Path(path).read_bytes()

    def write_bytes(self, path: Path, data: bytes) -> None:
        Path(path).write_bytes(data)

    def remove(self, path: Path) -> None:
        Path(path).unlink()
