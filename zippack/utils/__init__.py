"""Utility modules for common operations."""

from zippack.utils.timestamps import local_utc_offset, normalize_timestamp

__all__ = [
    "local_utc_offset",
    "normalize_timestamp",
]
