"""Tests for package.json access and the best-effort readers."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from superpowers_nextjs.manifest import (
    Manifest,
    file_contains,
    is_dir_safe,
    is_file_safe,
    load_json_safe,
    read_text_safe,
)


class TestReaders:
    def test_read_missing_file(self, tmp_path: Path):
        assert read_text_safe(tmp_path / "nope.json") is None

    def test_read_directory_is_none(self, tmp_path: Path):
        (tmp_path / "pkg").mkdir()
        assert read_text_safe(tmp_path / "pkg") is None

    def test_load_json_malformed(self, tmp_path: Path):
        f = tmp_path / "bad.json"
        f.write_text("{not json")
        assert load_json_safe(f) is None

    def test_load_json_valid(self, tmp_path: Path):
        f = tmp_path / "ok.json"
        f.write_text('{"a": 1}')
        assert load_json_safe(f) == {"a": 1}

    def test_file_contains(self, tmp_path: Path):
        f = tmp_path / "next.config.js"
        f.write_text("module.exports = { experimental: { mcpServer: true } }")
        assert file_contains(f, "mcpServer")
        assert not file_contains(f, "next-devtools")
        assert not file_contains(tmp_path / "missing.js", "mcpServer")


class TestManifest:
    def test_load_missing(self, tmp_path: Path):
        assert Manifest.load(tmp_path) is None

    def test_dependency_lookup_across_sections(self, tmp_path: Path):
        (tmp_path / "package.json").write_text(
            '{"dependencies": {"next": "15.1.0"}, "devDependencies": {"jest": "^29.0.0"}}'
        )
        manifest = Manifest.load(tmp_path)
        assert manifest is not None
        assert manifest.dependency_spec("next") == "15.1.0"
        assert manifest.dependency_spec("jest") == "^29.0.0"
        assert manifest.has_dependency("jest")
        assert not manifest.has_dependency("vitest")

    def test_scripts_are_not_dependencies(self, tmp_path: Path):
        (tmp_path / "package.json").write_text(
            '{"scripts": {"next": "next dev"}, "dependencies": {"react": "19.0.0"}}'
        )
        manifest = Manifest.load(tmp_path)
        assert manifest is not None
        assert not manifest.has_dependency("next")

    def test_malformed_json_falls_back_to_text(self, tmp_path: Path):
        (tmp_path / "package.json").write_text(
            '{"dependencies": {"next": "^14.2.1", "react": "18.2.0",}}'
        )
        manifest = Manifest.load(tmp_path)
        assert manifest is not None
        assert manifest.data is None
        assert manifest.dependency_spec("next") == "^14.2.1"
        assert not manifest.has_dependency("vitest")

    def test_non_object_json(self, tmp_path: Path):
        (tmp_path / "package.json").write_text('["next"]')
        manifest = Manifest.load(tmp_path)
        assert manifest is not None
        assert manifest.data is None
        assert not manifest.has_dependency("next")


class TestUnreadablePaths:
    """stat/open failures other than "not found" are treated as absent files."""

    @pytest.fixture
    def denied(self):
        path = MagicMock(spec=Path)
        path.is_file.side_effect = PermissionError(13, "Permission denied")
        path.is_dir.side_effect = PermissionError(13, "Permission denied")
        return path

    def test_is_file_safe(self, denied):
        assert is_file_safe(denied) is False

    def test_is_dir_safe(self, denied):
        assert is_dir_safe(denied) is False

    def test_read_text_stat_denied(self, denied):
        assert read_text_safe(denied) is None

    def test_read_text_open_denied(self):
        path = MagicMock(spec=Path)
        path.is_file.return_value = True
        path.read_text.side_effect = PermissionError(13, "Permission denied")
        assert read_text_safe(path) is None

    def test_file_contains_denied(self, denied):
        assert file_contains(denied, "mcpServer") is False


class TestDeeplyNestedJson:
    def test_load_json_safe(self, tmp_path: Path):
        f = tmp_path / "package-lock.json"
        f.write_text("[" * 200000)
        assert load_json_safe(f) is None

    def test_manifest_load(self, tmp_path: Path):
        (tmp_path / "package.json").write_text("[" * 200000)
        manifest = Manifest.load(tmp_path)
        assert manifest is not None
        assert manifest.data is None
        assert not manifest.has_dependency("next")
