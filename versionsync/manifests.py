# versionsync/manifests.py - Manifest reading and atomic writes
"""
SINGLE SOURCE OF TRUTH for manifest file I/O.

This module provides:
- JSON manifest loading with typed errors
- Raw text loading that preserves line endings
- Atomic file writes (temp file + fsync + rename)

Per the project rules:
- All path operations use pathlib.Path
- Atomic writes protect against partial/corrupt writes
- A target keeps its permission bits across a rewrite
"""

import json
import logging
import os
import re
import shutil
import stat
import tempfile
from pathlib import Path
from typing import Any, Dict

from versionsync.constants import Formatting
from versionsync.errors import ManifestNotFoundError, ManifestWriteError, ParseError

_manifest_logger = logging.getLogger("versionsync.manifests")

# Lone UTF-16 surrogates survive json.loads but cannot be encoded as UTF-8
_LONE_SURROGATE = re.compile("[\ud800-\udfff]")


class _NonStandardConstant(ValueError):
    """NaN, Infinity or -Infinity, which Python's json accepts and JSON does not."""


def _reject_constant(token: str):
    raise _NonStandardConstant(token)


# =============================================================================
# Reading
# =============================================================================


def load_json_manifest(path: Path) -> Dict[str, Any]:
    """
    Load a JSON manifest whose top level must be an object.

    Args:
        path: Path to the manifest

    Returns:
        Parsed manifest as a dict (key order preserved)

    Raises:
        ManifestNotFoundError: If the file doesn't exist
        ParseError: If the content is not valid JSON or not an object
    """
    path = Path(path)
    _manifest_logger.debug(f"Loading JSON manifest {path}")

    try:
        with open(path, "r", encoding=Formatting.TEXT_ENCODING) as f:
            data = json.load(f, parse_constant=_reject_constant)
    except FileNotFoundError as e:
        raise ManifestNotFoundError("file not found", path) from e
    except json.JSONDecodeError as e:
        raise ParseError(f"invalid JSON: {e.msg} (line {e.lineno}, column {e.colno})", path) from e
    except _NonStandardConstant as e:
        raise ParseError(f"invalid JSON: non-standard constant {e}", path) from e
    except UnicodeDecodeError as e:
        raise ParseError(f"not valid {Formatting.TEXT_ENCODING} text", path) from e

    if not isinstance(data, dict):
        raise ParseError(f"expected a JSON object at top level, got {type(data).__name__}", path)

    return data


def read_text_manifest(path: Path) -> str:
    """
    Read a text manifest verbatim.

    Line endings are not translated, so a rewrite only changes what it
    replaces.

    Raises:
        ManifestNotFoundError: If the file doesn't exist
        ParseError: If the file is not valid UTF-8 text
    """
    path = Path(path)
    _manifest_logger.debug(f"Reading text manifest {path}")

    try:
        with open(path, "r", encoding=Formatting.TEXT_ENCODING, newline="") as f:
            return f.read()
    except FileNotFoundError as e:
        raise ManifestNotFoundError("file not found", path) from e
    except UnicodeDecodeError as e:
        raise ParseError(f"not valid {Formatting.TEXT_ENCODING} text", path) from e


# =============================================================================
# Atomic Writes
# =============================================================================


def ensure_writable(path: Path) -> None:
    """
    Refuse to replace an existing file the current process may not write.

    A rename would silently replace a read-only file on POSIX, so the
    permission is checked up front. os.access() always succeeds for root,
    so a file with no write bit set at all is refused as well.

    Raises:
        ManifestWriteError: If the file exists and is read-only
    """
    path = Path(path)
    if not path.exists():
        return

    write_bits = stat.S_IWUSR | stat.S_IWGRP | stat.S_IWOTH
    if not os.access(path, os.W_OK) or not path.stat().st_mode & write_bits:
        raise ManifestWriteError("file is read-only", path)


def write_file_atomic(file_path: Path, content: str, encoding: str = Formatting.TEXT_ENCODING) -> None:
    """
    Write text content to file atomically.

    Uses write-to-temp + rename strategy to prevent partial writes. The
    content is written exactly as given (no newline translation).

    Args:
        file_path: Path to the file to write
        content: Text content to write
        encoding: Text encoding (default: utf-8)

    Raises:
        ManifestWriteError: If the target is read-only, the content cannot be
            encoded, or the write fails
    """
    file_path = Path(file_path)
    ensure_writable(file_path)

    temp_fd = None
    temp_path = None

    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)

        # Temp file in same directory (ensures same filesystem for rename)
        temp_fd, temp_path = tempfile.mkstemp(
            suffix=Formatting.TEMP_SUFFIX,
            prefix=Formatting.TEMP_PREFIX,
            dir=str(file_path.parent),
        )

        with os.fdopen(temp_fd, "w", encoding=encoding, newline="") as f:
            temp_fd = None  # Prevent double-close
            f.write(content)
            f.flush()
            os.fsync(f.fileno())

        # mkstemp creates 0600; keep the target's mode
        if file_path.exists():
            shutil.copymode(file_path, temp_path)

        Path(temp_path).replace(file_path)
        temp_path = None

        _manifest_logger.debug(f"File written atomically to {file_path}")

    except OSError as e:
        raise ManifestWriteError(f"write failed: {e.strerror or e}", file_path) from e
    except UnicodeEncodeError as e:
        raise ManifestWriteError(f"content cannot be encoded as {encoding}: {e.reason}", file_path) from e

    finally:
        if temp_fd is not None:
            try:
                os.close(temp_fd)
            except OSError:
                pass

        if temp_path is not None:
            try:
                os.unlink(temp_path)
            except OSError:
                pass


def dump_json_manifest(data: Dict[str, Any]) -> str:
    """
    Serialize a manifest the way it is stored: 2-space indent, trailing newline.

    Non-ASCII text is written literally, except lone surrogates, which are
    escaped as \\uXXXX (as JSON.stringify does) so the file stays valid UTF-8
    and re-parses to the same string.
    """
    text = json.dumps(data, indent=Formatting.JSON_INDENT, ensure_ascii=False)
    text = _LONE_SURROGATE.sub(lambda m: f"\\u{ord(m.group()):04x}", text)
    return text + "\n"


def write_json_atomic(path: Path, data: Dict[str, Any]) -> None:
    """
    Write a JSON manifest atomically.

    Serialization happens before the temp file is created, so a value
    that is not JSON serializable leaves nothing behind.

    Raises:
        TypeError: If data is not JSON serializable
        ManifestWriteError: If the target is read-only or the write fails
    """
    write_file_atomic(path, dump_json_manifest(data))
    _manifest_logger.info(f"Manifest written atomically to {path}")
