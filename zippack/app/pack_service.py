"""Pack service for build output archives.

Walks a build output directory, stages every included entry into an
archive builder and writes the compressed archive to the output directory.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from zippack.app.ports import ArchiveCodecPort, ArchiveScope, StoragePort
from zippack.config import EntryFilter, PackOptions, resolve_options
from zippack.errors import ArchiveConstructionError, ConfigurationError, MissingInputError
from zippack.utils.timestamps import normalize_timestamp

logger = logging.getLogger(__name__)

MAX_COMPRESSION_LEVEL = 9


class PackResult(BaseModel):
    """Outcome of a single pack invocation."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    success: bool
    output_path: Path | None = None
    file_count: int = 0
    directory_count: int = 0
    error: Exception | None = None

    @property
    def entry_count(self) -> int:
        return self.file_count + self.directory_count


@dataclass(slots=True)
class _PackStats:
    files: int = 0
    directories: int = 0


class PackService:
    """Orchestrates archive creation for a build output directory.

    All I/O operations delegated to the storage and archive ports.
    No direct filesystem access.
    """

    def __init__(
        self,
        storage_port: StoragePort,
        archive_port: ArchiveCodecPort,
        *,
        log: logging.Logger | None = None,
    ) -> None:
        """Initialize pack service.

        Args:
            storage_port: Filesystem operations port
            archive_port: Archive codec port
            log: Logger for progress messages (defaults to the module logger)
        """
        self.storage = storage_port
        self.archive = archive_port
        self.log = log or logger

    def pack(self, options: PackOptions | None = None) -> PackResult:
        """Archive the input directory and report the outcome.

        Failures never propagate: they are passed to ``options.done`` and
        returned on the result.

        Args:
            options: Pack options; missing values fall back to defaults

        Returns:
            PackResult describing the archive or the failure
        """
        resolved = resolve_options(options)
        stats = _PackStats()
        self.log.info('Zip packing - "%s" folder:', resolved.in_dir)

        try:
            output_path = self._pack(resolved, stats)
        except Exception as exc:
            self.log.error("Something went wrong while building zip file: %s", exc)
            self._notify(resolved, exc)
            return PackResult(
                success=False,
                file_count=stats.files,
                directory_count=stats.directories,
                error=exc,
            )

        self.log.info("Done.")
        self._notify(resolved, None)
        return PackResult(
            success=True,
            output_path=output_path,
            file_count=stats.files,
            directory_count=stats.directories,
        )

    def _pack(self, options: PackOptions, stats: _PackStats) -> Path:
        # resolve_options() guarantees the path fields are set
        in_dir = self.storage.join(options.in_dir or "")
        out_dir = self.storage.join(options.out_dir or "")
        prefix = options.path_prefix

        if prefix and self.storage.is_absolute(prefix):
            raise ConfigurationError(f"Path prefix must be a relative path: {prefix!r}")

        if not self.storage.is_dir(in_dir):
            raise MissingInputError(f'"{in_dir}" folder does not exist!')

        if not self.storage.exists(out_dir):
            self.storage.make_dirs(out_dir)

        root = self.archive.create()
        if prefix:
            if os.sep != "/":
                prefix = prefix.replace(os.sep, "/")
            root.add_directory(prefix)
            scope = root.folder(prefix)
            if scope is None:
                raise ArchiveConstructionError(f"Cannot create archive folder for prefix {prefix!r}")
            # every staged marker so far belongs to the prefix
            stats.directories += len(root.names())
        else:
            scope = root

        self.log.info("Preparing files.")
        self.add_directory_to_archive(scope, in_dir, entry_filter=options.filter, stats=stats)

        self.log.info("Creating zip archive.")
        destination = self.storage.join(out_dir, options.out_file_name or "")
        self.create_zip_archive(scope, destination)
        return destination

    def add_directory_to_archive(
        self,
        scope: ArchiveScope,
        directory: Path,
        *,
        entry_filter: EntryFilter | None = None,
        stats: _PackStats | None = None,
    ) -> None:
        """Recursively stage the contents of ``directory`` into ``scope``.

        The filter is consulted for every descendant of ``directory`` but
        never for ``directory`` itself. A directory rejected by the filter
        is skipped together with its whole subtree.

        Args:
            scope: Archive scope receiving the entries
            directory: Directory to walk
            entry_filter: Optional ``(name, path, is_dir) -> bool`` predicate
            stats: Optional counters updated for each staged entry
        """
        for name in self.storage.list_dir(directory):
            entry = self.storage.stat(self.storage.join(directory, name))
            date = normalize_timestamp(entry.mtime)

            if entry.is_dir:
                if entry_filter is not None and not entry_filter(name, entry.path, True):
                    self.log.debug("Skipping directory %s", entry.path)
                    continue

                scope.add_directory(name, date=date)
                child_scope = scope.folder(name)
                if child_scope is None:
                    raise ArchiveConstructionError(f"Cannot create archive folder for {entry.path}")
                if stats is not None:
                    stats.directories += 1
                self.log.debug("Added directory %s%s/", scope.root, name)

                self.add_directory_to_archive(
                    child_scope, entry.path, entry_filter=entry_filter, stats=stats
                )
            else:
                if entry_filter is not None and not entry_filter(name, entry.path, False):
                    self.log.debug("Skipping file %s", entry.path)
                    continue

                scope.add_file(name, self.storage.read_bytes(entry.path), date=date)
                if stats is not None:
                    stats.files += 1
                self.log.debug("Added file %s%s", scope.root, name)

    def create_zip_archive(self, scope: ArchiveScope, destination: Path) -> None:
        """Serialize ``scope`` at maximum compression and write it to ``destination``.

        An existing file at ``destination`` is deleted before writing.
        """
        scope.reset_root()
        content = scope.generate(compression_level=MAX_COMPRESSION_LEVEL)

        if self.storage.exists(destination):
            self.storage.remove(destination)

        self.storage.write_bytes(destination, content)
        self.log.debug("Wrote %d bytes to %s", len(content), destination)

    def _notify(self, options: PackOptions, error: Exception | None) -> None:
        if options.done is None:
            return
        try:
            options.done(error)
        except Exception:
            self.log.exception("Pack completion callback raised")
