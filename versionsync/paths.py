# versionsync/paths.py - SINGLE SOURCE OF TRUTH for manifest locations
"""
All manifest paths MUST be built here as Path objects.
No other module may construct filesystem paths.

RULES:
- All paths are Path objects internally
- Convert to str() ONLY at I/O boundaries (print, subprocess)
- Locations are resolved from the project root, never from the CWD
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Union

from versionsync.constants import FileNames


class Paths:
    """
    Centralized path definitions. All paths are Path objects.

    Usage:
        from versionsync.paths import Paths
        cargo_toml = Paths.cargo_toml(project_root)
    """

    @classmethod
    def project_root_from_script(cls, script_file: Union[str, Path]) -> Path:
        """Return the project root for a launcher living in <root>/scripts/."""
        return Path(script_file).resolve().parent.parent

    @classmethod
    def tauri_dir(cls, project_root: Path) -> Path:
        """Return the src-tauri directory path."""
        return Path(project_root) / FileNames.TAURI_DIR

    @classmethod
    def package_json(cls, project_root: Path) -> Path:
        """Return the authoritative manifest path."""
        return Path(project_root) / FileNames.PACKAGE_JSON

    @classmethod
    def tauri_conf_json(cls, project_root: Path) -> Path:
        return cls.tauri_dir(project_root) / FileNames.TAURI_CONF_JSON

    @classmethod
    def cargo_toml(cls, project_root: Path) -> Path:
        return cls.tauri_dir(project_root) / FileNames.CARGO_TOML


@dataclass(frozen=True)
class ManifestPaths:
    """The three files one sync run reads and writes."""

    source: Path
    structured: Path
    line_oriented: Path

    @classmethod
    def for_project(cls, project_root: Union[str, Path]) -> "ManifestPaths":
        """Build the fixed manifest layout of a Tauri project."""
        root = Path(project_root)
        return cls(
            source=Paths.package_json(root),
            structured=Paths.tauri_conf_json(root),
            line_oriented=Paths.cargo_toml(root),
        )
