"""Exception hierarchy for zippack packaging failures."""

from __future__ import annotations


class ZipPackError(Exception):
    """Base class for packaging failures raised by zippack itself."""


class ConfigurationError(ZipPackError, ValueError):
    """Raised when pack options are invalid (e.g. an absolute path prefix)."""


class MissingInputError(ZipPackError, FileNotFoundError):
    """Raised when the input directory does not exist."""


class ArchiveConstructionError(ZipPackError, RuntimeError):
    """Raised when the archive codec refuses to create a directory scope."""
