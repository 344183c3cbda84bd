"""In-memory ZIP archive builder backed by :mod:`zipfile`."""

from __future__ import annotations

import io
import time
from dataclasses import dataclass
from datetime import datetime
from zipfile import ZIP_DEFLATED, ZIP_STORED, ZipFile, ZipInfo

from zippack.app.ports import ArchiveCodecPort, ArchiveScope
from zippack.utils.timestamps import normalize_timestamp

# DOS date/time range representable in a ZIP local header
_MIN_DATE_TIME = (1980, 1, 1, 0, 0, 0)
_MAX_DATE_TIME = (2107, 12, 31, 23, 59, 58)

_DIR_ATTR = (0o40755 << 16) | 0x10
_FILE_ATTR = 0o100644 << 16


@dataclass(slots=True)
class StagedEntry:
    """A file or directory marker waiting to be serialized."""

    name: str
    data: bytes | None
    is_dir: bool
    date: datetime


def _clamp_date_time(date: datetime) -> tuple[int, int, int, int, int, int]:
    fields = (date.year, date.month, date.day, date.hour, date.minute, date.second)
    if fields < _MIN_DATE_TIME:
        return _MIN_DATE_TIME
    if fields > _MAX_DATE_TIME:
        return _MAX_DATE_TIME
    return fields


def _is_valid_name(name: str) -> bool:
    if not name or name.startswith("/"):
        return False
    segments = [segment for segment in name.split("/") if segment]
    if not segments:
        return False
    return all(segment not in {".", ".."} for segment in segments)


class ZipArchiveBuilder(ArchiveScope):
    """Scope into a shared, ordered set of staged ZIP entries.

    Adding ``a/b/c.txt`` creates the ``a/`` and ``a/b/`` markers when they
    are missing. Re-adding an existing name replaces the staged entry but
    keeps its original position.
    """

    def __init__(
        self,
        entries: dict[str, StagedEntry] | None = None,
        *,
        root: str = "",
    ) -> None:
        self._entries: dict[str, StagedEntry] = entries if entries is not None else {}
        self._root = root

    @property
    def root(self) -> str:
        return self._root

    @property
    def entries(self) -> list[StagedEntry]:
        return list(self._entries.values())

    def names(self) -> list[str]:
        return list(self._entries)

    def add_directory(self, name: str, *, date: datetime | None = None) -> None:
        full_name = self._root + name
        if not full_name.endswith("/"):
            full_name += "/"
        self._stage(full_name, None, is_dir=True, date=date)

    def add_file(self, name: str, data: bytes, *, date: datetime | None = None) -> None:
        full_name = self._root + name
        self._stage(full_name, bytes(data), is_dir=False, date=date)

    def folder(self, name: str) -> ZipArchiveBuilder | None:
        if not _is_valid_name(name):
            return None
        folder_name = self._root + name.strip("/") + "/"
        if folder_name not in self._entries:
            self._stage(folder_name, None, is_dir=True, date=None)
        return ZipArchiveBuilder(self._entries, root=folder_name)

    def reset_root(self) -> None:
        self._root = ""

    def generate(self, *, compression_level: int = 9) -> bytes:
        """Serialize every entry below this scope's root.

        Entry names are written relative to the root, so a sub-scope must
        be realigned with :meth:`reset_root` to emit full archive paths.
        """
        if not 0 <= compression_level <= 9:
            raise ValueError(f"Compression level must be between 0 and 9: {compression_level}")

        compress_type = ZIP_DEFLATED if compression_level > 0 else ZIP_STORED
        buffer = io.BytesIO()
        with ZipFile(buffer, "w", compression=compress_type, compresslevel=compression_level) as archive:
            for full_name, entry in self._entries.items():
                if not full_name.startswith(self._root):
                    continue
                relative_name = full_name[len(self._root):]
                if not relative_name:
                    continue

                info = ZipInfo(relative_name, date_time=_clamp_date_time(entry.date))
                if entry.is_dir:
                    info.compress_type = ZIP_STORED
                    info.external_attr = _DIR_ATTR
                    archive.writestr(info, b"")
                else:
                    info.compress_type = compress_type
                    info.external_attr = _FILE_ATTR
                    archive.writestr(info, entry.data or b"", compresslevel=compression_level)

        return buffer.getvalue()

    def _stage(self, full_name: str, data: bytes | None, *, is_dir: bool, date: datetime | None) -> None:
        stamp = date if date is not None else normalize_timestamp(time.time())
        self._ensure_parents(full_name)
        self._entries[full_name] = StagedEntry(name=full_name, data=data, is_dir=is_dir, date=stamp)

    def _ensure_parents(self, full_name: str) -> None:
        segments = full_name.rstrip("/").split("/")[:-1]
        parent = ""
        for segment in segments:
            if not segment:
                continue
            parent += segment + "/"
            if parent not in self._entries:
                self._entries[parent] = StagedEntry(
                    name=parent,
                    data=None,
                    is_dir=True,
                    date=normalize_timestamp(time.time()),
                )


class ZipArchiveCodec(ArchiveCodecPort):
    """Create empty ZIP archive builders."""

    def create(self) -> ZipArchiveBuilder:
        return ZipArchiveBuilder()
