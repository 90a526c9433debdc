#!/usr/bin/env python3
"""
Sync the app version from package.json into the Tauri manifests.

Updates:
- src-tauri/tauri.conf.json  ("version" field)
- src-tauri/Cargo.toml       (first `version = "..."` line)

Usage:
    python scripts/sync_version.py

Paths are resolved from this file's location, so the script can be run
from any working directory.
"""

import sys
from pathlib import Path

# Add project root to path
SCRIPT_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = SCRIPT_DIR.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from versionsync.cli import main
from versionsync.paths import Paths

if __name__ == "__main__":
    raise SystemExit(main(project_root=Paths.project_root_from_script(__file__)))
