"""Timestamp helpers for archive entries."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def local_utc_offset(mtime: float) -> timedelta:
    """Return the local timezone offset in effect at ``mtime``."""
    offset = datetime.fromtimestamp(mtime, tz=UTC).astimezone().utcoffset()
    return offset if offset is not None else timedelta(0)


def normalize_timestamp(mtime: float) -> datetime:
    """Shift a POSIX timestamp so its UTC fields read as local wall-clock time.

    ZIP headers carry a bare DOS date/time with no zone. The returned naive
    datetime holds the UTC fields of ``mtime + local offset``, which equal
    the local wall-clock time of ``mtime``.

    Args:
        mtime: Seconds since the epoch (e.g. ``os.stat().st_mtime``)

    Returns:
        Naive datetime to embed in the archive
    """
    shifted = _EPOCH + timedelta(seconds=mtime) + local_utc_offset(mtime)
    return shifted.replace(tzinfo=None)
