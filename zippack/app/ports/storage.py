"""Storage port interface for filesystem operations."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


@dataclass(frozen=True, slots=True)
class FileSystemEntry:
    """Read-only view of a single filesystem entry."""

    name: str
    path: Path
    is_dir: bool
    mtime: float


class StoragePort(Protocol):
    """Port interface for storage operations.

    Abstracts filesystem I/O to enable testing and alternative backends.

    Side effects: Reads/writes files.
    """

    def exists(self, path: Path) -> bool:
        """Return True when ``path`` exists."""
        ...

    def is_dir(self, path: Path) -> bool:
        """Return True when ``path`` exists and is a directory."""
        ...

    def is_absolute(self, path: Path | str) -> bool:
        """Return True when ``path`` is an absolute path."""
        ...

    def join(self, *parts: Path | str) -> Path:
        """Join path segments."""
        ...

    def make_dirs(self, path: Path) -> None:
        """Create ``path`` including any missing intermediate directories."""
        ...

    def list_dir(self, path: Path) -> list[str]:
        """List the names of the direct children of a directory.

        Args:
            path: Directory path

        Returns:
            Child names in the order the filesystem returns them
        """
        ...

    def stat(self, path: Path) -> FileSystemEntry:
        """Describe a file or directory.

        Args:
            path: Entry path

        Returns:
            FileSystemEntry with directory flag and modification time
        """
        ...

    def read_bytes(self, path: Path) -> bytes:
        """Read the full content of a file."""
        ...

    def write_bytes(self, path: Path, data: bytes) -> None:
        """Write ``data`` to ``path``, creating or overwriting the file."""
        ...

    def remove(self, path: Path) -> None:
        """Delete the file at ``path``."""
        ...
