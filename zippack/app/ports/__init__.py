"""Port interfaces for the zippack application layer.

These protocol interfaces define contracts for adapters.
Packaging logic depends on these ports, never on concrete implementations.
"""

__all__ = [
    "ArchiveCodecPort",
    "ArchiveScope",
    "FileSystemEntry",
    "StoragePort",
]

from zippack.app.ports.archive import ArchiveCodecPort, ArchiveScope
from zippack.app.ports.storage import FileSystemEntry, StoragePort
