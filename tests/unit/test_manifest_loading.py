"""
Tests for manifest reading: typed errors for missing and malformed files,
and verbatim text reads.
"""

from pathlib import Path

import pytest

from versionsync.errors import ManifestNotFoundError, ParseError, VersionSyncError
from versionsync.manifests import load_json_manifest, read_text_manifest


class TestLoadJsonManifest:
    def test_loads_object(self, tmp_path):
        path = tmp_path / "package.json"
        path.write_text('{"name": "app", "version": "1.2.3"}', encoding="utf-8")

        assert load_json_manifest(path) == {"name": "app", "version": "1.2.3"}

    def test_missing_file(self, tmp_path):
        path = tmp_path / "package.json"

        with pytest.raises(ManifestNotFoundError) as exc_info:
            load_json_manifest(path)

        # Still a FileNotFoundError for callers that catch the builtin
        assert isinstance(exc_info.value, FileNotFoundError)
        assert exc_info.value.path == path
        assert str(path) in str(exc_info.value)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "package.json"
        path.write_text('{"version": "1.2.3",}', encoding="utf-8")

        with pytest.raises(ParseError) as exc_info:
            load_json_manifest(path)

        assert isinstance(exc_info.value, ValueError)
        assert "invalid JSON" in str(exc_info.value)
        assert "line 1" in str(exc_info.value)

    def test_empty_file_is_parse_error(self, tmp_path):
        path = tmp_path / "package.json"
        path.write_text("", encoding="utf-8")

        with pytest.raises(ParseError):
            load_json_manifest(path)

    @pytest.mark.parametrize("content", ["[]", '"1.2.3"', "42", "null"])
    def test_non_object_top_level(self, tmp_path, content):
        path = tmp_path / "package.json"
        path.write_text(content, encoding="utf-8")

        with pytest.raises(ParseError, match="JSON object"):
            load_json_manifest(path)

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "package.json"
        path.write_bytes(b'{"version": "\xff"}')

        with pytest.raises(ParseError, match="utf-8"):
            load_json_manifest(path)


class TestReadTextManifest:
    def test_keeps_crlf_line_endings(self, tmp_path):
        path = tmp_path / "Cargo.toml"
        path.write_bytes(b'[package]\r\nversion = "0.1.0"\r\n')

        assert read_text_manifest(path) == '[package]\r\nversion = "0.1.0"\r\n'

    def test_missing_file(self, tmp_path):
        with pytest.raises(ManifestNotFoundError):
            read_text_manifest(tmp_path / "Cargo.toml")

    def test_errors_share_base_class(self, tmp_path):
        with pytest.raises(VersionSyncError):
            read_text_manifest(tmp_path / "Cargo.toml")


class TestNonStandardJsonConstants:
    """NaN and Infinity are Python extensions, not JSON."""

    @pytest.mark.parametrize("token", ["NaN", "Infinity", "-Infinity"])
    def test_constant_is_parse_error(self, tmp_path, token):
        path = tmp_path / "tauri.conf.json"
        path.write_text(f'{{"version": "0.1.0", "ratio": {token}}}', encoding="utf-8")

        with pytest.raises(ParseError, match=token):
            load_json_manifest(path)

    def test_structured_rewrite_refuses_nan(self, tmp_path):
        from versionsync.sync import update_json_version

        path = tmp_path / "tauri.conf.json"
        original = '{"version": "0.1.0", "ratio": NaN}'
        path.write_text(original, encoding="utf-8")

        with pytest.raises(ParseError):
            update_json_version(path, "1.2.3")

        assert path.read_text(encoding="utf-8") == original

    def test_nan_inside_string_is_fine(self, tmp_path):
        path = tmp_path / "package.json"
        path.write_text('{"version": "NaN"}', encoding="utf-8")

        assert load_json_manifest(path) == {"version": "NaN"}
