"""Concrete adapters wiring application ports to built-in implementations."""

from __future__ import annotations

from .storage import FileSystemStorageAdapter
from .zip_archive import StagedEntry, ZipArchiveBuilder, ZipArchiveCodec

__all__ = [
    "FileSystemStorageAdapter",
    "StagedEntry",
    "ZipArchiveBuilder",
    "ZipArchiveCodec",
]
