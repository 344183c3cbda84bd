"""Ports for staging and serializing archives."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol


class ArchiveScope(Protocol):
    """Handle into an in-progress archive.

    A scope represents either the archive root or a named subdirectory.
    Names passed to a scope are relative to its location.
    """

    @property
    def root(self) -> str:
        """Path of this scope inside the archive ("" for the archive root)."""
        ...

    def add_directory(self, name: str, *, date: datetime | None = None) -> None:
        """Register a directory marker at ``name``."""
        ...

    def add_file(self, name: str, data: bytes, *, date: datetime | None = None) -> None:
        """Register a file at ``name`` with ``data`` as content."""
        ...

    def folder(self, name: str) -> ArchiveScope | None:
        """Return a sub-scope for ``name`` or None when the name is rejected."""
        ...

    def reset_root(self) -> None:
        """Realign this scope to the archive root before serialization."""
        ...

    def names(self) -> list[str]:
        """Return the staged entry names in insertion order."""
        ...

    def generate(self, *, compression_level: int = 9) -> bytes:
        """Serialize the whole archive into a compressed byte buffer."""
        ...


class ArchiveCodecPort(Protocol):
    """Port interface for archive codecs."""

    def create(self) -> ArchiveScope:
        """Create an empty archive and return its root scope."""
        ...
