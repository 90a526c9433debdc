#!/usr/bin/env python3
"""
Pytest configuration and shared fixtures for versionsync tests.

This module sets up the Python path so tests run from a plain checkout,
and provides throwaway Tauri project trees.
"""

import json
import sys
from pathlib import Path

# =============================================================================
# Path Setup - Execute BEFORE any test imports
# =============================================================================

# tests/conftest.py → tests/ → repository root
_tests_dir = Path(__file__).resolve().parent
_repo_root = _tests_dir.parent

if str(_repo_root) not in sys.path:
    sys.path.insert(0, str(_repo_root))

# Export for tests that need these paths
REPO_ROOT = _repo_root
SCRIPTS_DIR = _repo_root / "scripts"
TESTS_DIR = _tests_dir

import pytest

# =============================================================================
# Sample manifests
# =============================================================================

SAMPLE_TAURI_CONF = {
    "$schema": "https://schema.tauri.app/config/2",
    "productName": "Numbat",
    "version": "0.1.0",
    "identifier": "com.numbat.desktop",
    "build": {"frontendDist": "../dist"},
}

SAMPLE_CARGO_TOML = """\
[package]
name = "numbat-desktop"
version = "0.1.0"
description = "Numbat calculator"
edition = "2021"

[build-dependencies]
tauri-build = { version = "2", features = [] }

[dependencies]
tauri = { version = "2", features = [] }
numbat = "1.17"
"""


def write_project(root: Path, package_version="1.2.3", tauri_conf=None, cargo_toml=None) -> Path:
    """Lay out package.json, src-tauri/tauri.conf.json and src-tauri/Cargo.toml under root."""
    root = Path(root)
    (root / "src-tauri").mkdir(parents=True, exist_ok=True)

    package = {"name": "numbat-desktop", "private": True, "type": "module"}
    if package_version is not None:
        package["version"] = package_version
    (root / "package.json").write_text(json.dumps(package, indent=2) + "\n", encoding="utf-8")

    conf = SAMPLE_TAURI_CONF if tauri_conf is None else tauri_conf
    conf_text = conf if isinstance(conf, str) else json.dumps(conf, indent=2) + "\n"
    (root / "src-tauri" / "tauri.conf.json").write_text(conf_text, encoding="utf-8")

    toml_text = SAMPLE_CARGO_TOML if cargo_toml is None else cargo_toml
    (root / "src-tauri" / "Cargo.toml").write_text(toml_text, encoding="utf-8", newline="")

    return root


# =============================================================================
# Shared Fixtures
# =============================================================================


@pytest.fixture
def repo_root():
    """Return the repository root path."""
    return REPO_ROOT


@pytest.fixture
def scripts_dir():
    """Return the scripts directory path."""
    return SCRIPTS_DIR


@pytest.fixture
def tauri_project(tmp_path):
    """A Tauri project whose package.json is at 1.2.3 and dependents at 0.1.0."""
    return write_project(tmp_path / "app")
