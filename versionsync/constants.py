# versionsync/constants.py - SINGLE SOURCE OF TRUTH for all shared literals
"""
All shared string and numeric constants MUST be defined here.
No other module may define these values.

Categories:
- FileNames: Manifest file and directory names
- ManifestKeys: JSON manifest keys
- Patterns: Regular expressions for line-oriented manifests
- Formatting: Serialization settings for rewritten manifests
- ExitCodes: Process exit status per failure kind
"""

import re


class FileNames:
    """Manifest file names, relative to the project root."""

    # Authoritative manifest (npm)
    PACKAGE_JSON = "package.json"

    # Tauri crate directory and its manifests
    TAURI_DIR = "src-tauri"
    TAURI_CONF_JSON = "tauri.conf.json"
    CARGO_TOML = "Cargo.toml"


class ManifestKeys:
    """Keys read from and written to JSON manifests."""

    VERSION = "version"


class Patterns:
    """Compiled patterns for line-oriented manifests."""

    # version = "x.y.z" at the start of a line; groups keep everything but the value
    TOML_VERSION_LINE = re.compile(r'^(version = ")([^"\r\n]*)(")', re.MULTILINE)


class Formatting:
    """Serialization settings for rewritten manifests."""

    JSON_INDENT = 2
    TEXT_ENCODING = "utf-8"

    # Temp file naming for atomic writes
    TEMP_PREFIX = "versionsync_"
    TEMP_SUFFIX = ".tmp"


class ExitCodes:
    """Process exit status, one per failure kind."""

    SUCCESS = 0
    UNEXPECTED = 1
    USAGE = 2  # argparse convention
    FILE_NOT_FOUND = 3
    PARSE_ERROR = 4
    MISSING_FIELD = 5
    PATTERN_NOT_FOUND = 6
    WRITE_ERROR = 7
