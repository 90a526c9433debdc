# versionsync/sync.py - Version Synchronizer
"""
Copies the version string from the authoritative manifest (package.json)
into the Tauri manifests (tauri.conf.json, Cargo.toml).

The run is a strictly linear pipeline:
1. Extract the version from the authoritative manifest
2. Rewrite the structured (JSON) dependent
3. Rewrite the first `version = "..."` line of the line-oriented (TOML) dependent

Any error halts the pipeline. Earlier writes are not undone: if step 3
fails, tauri.conf.json already carries the new version.
"""

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from versionsync.cli_output import CLIOutput, get_output
from versionsync.constants import Formatting, ManifestKeys, Patterns
from versionsync.errors import MissingFieldError, ParseError, PatternNotFoundError
from versionsync.manifests import (
    load_json_manifest,
    read_text_manifest,
    write_file_atomic,
    write_json_atomic,
)
from versionsync.paths import ManifestPaths

_sync_logger = logging.getLogger("versionsync.sync")


@dataclass(frozen=True)
class SyncResult:
    """Outcome of a successful sync run."""

    version: str
    structured: Path
    line_oriented: Path


# =============================================================================
# Step A - Extract
# =============================================================================


def read_manifest_version(path: Path) -> str:
    """
    Read the version string from the authoritative manifest.

    Args:
        path: Path to package.json

    Returns:
        The version string, verbatim

    Raises:
        ManifestNotFoundError: If the file doesn't exist
        ParseError: If the file is not a JSON object
        MissingFieldError: If there is no string `version` field
    """
    manifest = load_json_manifest(path)

    if ManifestKeys.VERSION not in manifest:
        raise MissingFieldError(f"no '{ManifestKeys.VERSION}' field", path)

    version = manifest[ManifestKeys.VERSION]
    if not isinstance(version, str):
        raise MissingFieldError(
            f"'{ManifestKeys.VERSION}' must be a string, got {type(version).__name__}", path
        )

    _sync_logger.debug(f"Authoritative version {version!r} read from {path}")
    return version


# =============================================================================
# Step B - Structured rewrite
# =============================================================================


def update_json_version(path: Path, version: str) -> None:
    """
    Set the top-level `version` of a JSON manifest and write it back.

    Other keys keep their values and order; a missing `version` key is
    appended.

    Raises:
        ManifestNotFoundError: If the file doesn't exist
        ParseError: If the file is not a JSON object
        ManifestWriteError: If the file cannot be written
    """
    manifest = load_json_manifest(path)
    manifest[ManifestKeys.VERSION] = version
    write_json_atomic(path, manifest)


# =============================================================================
# Step C - Pattern rewrite
# =============================================================================


def replace_toml_version(text: str, version: str) -> str:
    """
    Replace the value of the first `version = "..."` line in text.

    Only the quoted value changes; the rest of the line and every later
    version line are left as they are.

    Raises:
        PatternNotFoundError: If no line matches
    """
    match = Patterns.TOML_VERSION_LINE.search(text)
    if match is None:
        raise PatternNotFoundError('no line of the form version = "..."')

    return text[: match.start(2)] + version + text[match.end(2):]


def _parses_as_toml(text: str) -> bool:
    try:
        tomllib.loads(text)
    except tomllib.TOMLDecodeError:
        return False
    return True


def update_toml_version(path: Path, version: str) -> None:
    """
    Rewrite the first `version = "..."` line of a TOML manifest.

    The file is left untouched when no line matches, when the version
    cannot be stored in a UTF-8 TOML file (lone surrogates), or when the
    rewrite would turn valid TOML into invalid TOML.

    Raises:
        ManifestNotFoundError: If the file doesn't exist
        PatternNotFoundError: If no version line exists
        ParseError: If the version cannot be stored or would break valid TOML
        ManifestWriteError: If the file cannot be written
    """
    path = Path(path)
    original = read_text_manifest(path)

    try:
        version.encode(Formatting.TEXT_ENCODING)
    except UnicodeEncodeError:
        raise ParseError(f"version {version!r} cannot be written as {Formatting.TEXT_ENCODING} TOML", path) from None

    try:
        updated = replace_toml_version(original, version)
    except PatternNotFoundError as e:
        raise PatternNotFoundError(e.message, path) from None

    if _parses_as_toml(original) and not _parses_as_toml(updated):
        raise ParseError(f"version {version!r} would make the file invalid TOML", path)

    write_file_atomic(path, updated)
    _sync_logger.info(f"Version line rewritten in {path}")


# =============================================================================
# Pipeline
# =============================================================================


def sync_versions(paths: ManifestPaths, output: Optional[CLIOutput] = None) -> SyncResult:
    """
    Propagate the authoritative version into both dependent manifests.

    Emits one progress line per step naming the target and the new value.

    Args:
        paths: The three manifests to read and write
        output: Console formatter (default: auto-detected)

    Returns:
        SyncResult with the synced version and the paths written

    Raises:
        VersionSyncError: Any failure; earlier writes are not rolled back
    """
    out = output or get_output()

    version = read_manifest_version(paths.source)
    out.log(f"Syncing version: {version}")

    update_json_version(paths.structured, version)
    out.info(f"Updated {paths.structured.name} to {version}")

    update_toml_version(paths.line_oriented, version)
    out.info(f"Updated {paths.line_oriented.name} to {version}")

    return SyncResult(version=version, structured=paths.structured, line_oriented=paths.line_oriented)
