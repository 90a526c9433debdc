# versionsync/cli.py - Command-line entry point
"""
Runs one version sync for a Tauri project and maps each failure kind to
its own exit code (see ExitCodes).

The command takes no arguments. The project root is passed in by the
launcher (scripts/sync_version.py), which derives it from its own
location, so the caller's working directory never matters.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from versionsync.cli_output import CLIOutput, get_output
from versionsync.constants import ExitCodes, FileNames
from versionsync.errors import VersionSyncError
from versionsync.paths import ManifestPaths
from versionsync.sync import sync_versions

_cli_logger = logging.getLogger("versionsync.cli")


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """
    Attach a stderr handler to the package logger.

    Progress output is printed by CLIOutput; the log handler only
    surfaces warnings and errors.

    Returns:
        The configured package logger
    """
    logger = logging.getLogger("versionsync")
    logger.setLevel(logging.DEBUG)

    if not logger.handlers:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        stderr_handler.setLevel(level)
        logger.addHandler(stderr_handler)

    return logger


def build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="sync_version.py",
        description=(
            f"Copy the version from {FileNames.PACKAGE_JSON} into "
            f"{FileNames.TAURI_DIR}/{FileNames.TAURI_CONF_JSON} and "
            f"{FileNames.TAURI_DIR}/{FileNames.CARGO_TOML}."
        ),
    )


def main(
    argv: Optional[List[str]] = None,
    *,
    project_root: Path,
    output: Optional[CLIOutput] = None,
) -> int:
    """
    Sync versions and return the process exit code.

    Args:
        argv: Command-line arguments (default: sys.argv[1:]); none are accepted
        project_root: Root of the Tauri project. Required: the launcher passes
            the parent of its own directory, so neither the working directory
            nor the install location of this package is ever used
        output: Console formatter (default: auto-detected)
    """
    parser = build_parser()
    try:
        parser.parse_args(argv)
    except SystemExit as e:
        # --help exits 0, unknown arguments exit 2
        return e.code if isinstance(e.code, int) else ExitCodes.USAGE

    setup_logging()
    out = output or get_output()

    paths = ManifestPaths.for_project(project_root)
    _cli_logger.debug(f"Project root: {project_root}")

    try:
        sync_versions(paths, output=out)
    except VersionSyncError as e:
        out.error(f"{type(e).__name__}: {e}")
        return e.exit_code
    except Exception as e:
        _cli_logger.critical("Unhandled exception during version sync", exc_info=True)
        out.error(f"{type(e).__name__}: {e}")
        return ExitCodes.UNEXPECTED

    return ExitCodes.SUCCESS

