"""Application bootstrap wiring ports, adapters, and services."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from zippack.app import PackService
from zippack.app.adapters import FileSystemStorageAdapter, ZipArchiveCodec
from zippack.app.ports import ArchiveCodecPort, StoragePort
from zippack.config import Settings, get_settings


@dataclass(slots=True)
class ApplicationContainer:
    """Aggregates wired services and adapters for the CLI and plugin layers."""

    settings: Settings
    storage_port: StoragePort
    archive_port: ArchiveCodecPort
    pack_service: PackService


def bootstrap_application(
    settings: Settings | None = None,
    *,
    log: logging.Logger | None = None,
) -> ApplicationContainer:
    """Instantiate adapters and services."""

    active_settings = settings or get_settings()

    storage = FileSystemStorageAdapter()
    archive = ZipArchiveCodec()
    pack_service = PackService(storage_port=storage, archive_port=archive, log=log)

    return ApplicationContainer(
        settings=active_settings,
        storage_port=storage,
        archive_port=archive,
        pack_service=pack_service,
    )
