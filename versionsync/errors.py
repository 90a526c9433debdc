# versionsync/errors.py - Error taxonomy for version synchronization
"""
Every failure raised by versionsync derives from VersionSyncError and
carries the process exit code the CLI reports for it.

Each class also derives from the closest builtin exception, so callers
that already handle FileNotFoundError, ValueError, KeyError or OSError
keep working.
"""

from pathlib import Path
from typing import Optional

from versionsync.constants import ExitCodes


class VersionSyncError(Exception):
    """Version synchronization failed."""

    exit_code = ExitCodes.UNEXPECTED

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.message = message
        self.path = Path(path) if path is not None else None

    def __str__(self) -> str:
        if self.path is not None:
            return f"{self.path}: {self.message}"
        return self.message


class ManifestNotFoundError(VersionSyncError, FileNotFoundError):
    """A manifest does not exist at its expected path."""

    exit_code = ExitCodes.FILE_NOT_FOUND


class ParseError(VersionSyncError, ValueError):
    """A manifest is not valid structured data."""

    exit_code = ExitCodes.PARSE_ERROR


class MissingFieldError(VersionSyncError, KeyError):
    """The authoritative manifest has no usable version field."""

    exit_code = ExitCodes.MISSING_FIELD


class PatternNotFoundError(VersionSyncError, LookupError):
    """The line-oriented manifest has no version line."""

    exit_code = ExitCodes.PATTERN_NOT_FOUND


class ManifestWriteError(VersionSyncError, OSError):
    """A manifest could not be written (read-only, disk full, ...)."""

    exit_code = ExitCodes.WRITE_ERROR
