# versionsync - keeps the Tauri manifests at the package.json version
# This package contains the single-source-of-truth modules for the sync tool.
from .errors import (
    ManifestNotFoundError,
    ManifestWriteError,
    MissingFieldError,
    ParseError,
    PatternNotFoundError,
    VersionSyncError,
)
from .paths import ManifestPaths, Paths
from .sync import (
    SyncResult,
    read_manifest_version,
    replace_toml_version,
    sync_versions,
    update_json_version,
    update_toml_version,
)

__version__ = "0.1.0"

# =============================================================================
# Public API
# =============================================================================
__all__ = [
    # Pipeline
    "sync_versions",
    "SyncResult",
    "read_manifest_version",
    "update_json_version",
    "update_toml_version",
    "replace_toml_version",
    # Paths
    "Paths",
    "ManifestPaths",
    # Errors
    "VersionSyncError",
    "ManifestNotFoundError",
    "ParseError",
    "MissingFieldError",
    "PatternNotFoundError",
    "ManifestWriteError",
]
