"""Tests for the Next.js app locator — pure filesystem logic."""

from __future__ import annotations

from pathlib import Path

import pytest

from superpowers_nextjs.locator import (
    find_enclosing_app,
    is_nextjs_app,
    locate_apps,
    select_active_app,
)


class TestLocateApps:
    def test_empty_tree(self, tmp_path: Path):
        assert locate_apps(tmp_path) == []

    def test_non_next_manifest_ignored(self, make_app, tmp_path: Path):
        make_app("api", deps={"express": "^4.18.0"})
        assert locate_apps(tmp_path) == []

    def test_single_app_at_root(self, make_app, tmp_path: Path):
        app = make_app()
        assert locate_apps(tmp_path) == [str(app)]

    def test_dev_dependency_counts(self, make_app, tmp_path: Path):
        app = make_app("web", deps={}, dev_deps={"next": "15.0.0"})
        assert locate_apps(tmp_path) == [str(app)]

    def test_monorepo_order_is_sorted(self, make_app, tmp_path: Path):
        docs = make_app("apps/docs")
        web = make_app("apps/web")
        admin = make_app("admin")
        assert locate_apps(tmp_path) == [str(admin), str(docs), str(web)]

    def test_parent_listed_before_children(self, make_app, tmp_path: Path):
        root = make_app()
        nested = make_app("packages/site")
        assert locate_apps(tmp_path) == [str(root), str(nested)]

    def test_node_modules_and_git_excluded(self, make_app, tmp_path: Path):
        app = make_app("web")
        make_app("web/node_modules/next")
        make_app("node_modules/some-starter")
        make_app(".git/fixtures/app")
        assert locate_apps(tmp_path) == [str(app)]

    def test_stable_across_runs(self, make_app, tmp_path: Path):
        make_app("b")
        make_app("a")
        assert locate_apps(tmp_path) == locate_apps(tmp_path)


class TestIsNextjsApp:
    def test_no_manifest(self, tmp_path: Path):
        assert not is_nextjs_app(tmp_path)

    def test_malformed_manifest_with_next(self, tmp_path: Path):
        (tmp_path / "package.json").write_text('{"dependencies": {"next": "14.0.0",}}')
        assert is_nextjs_app(tmp_path)


class TestFindEnclosingApp:
    def test_from_nested_directory(self, make_app):
        app = make_app("web", dirs=["src/components/ui"])
        assert find_enclosing_app(app / "src" / "components" / "ui") == str(app)

    def test_nearest_wins(self, make_app):
        make_app()
        inner = make_app("packages/site", dirs=["app"])
        assert find_enclosing_app(inner / "app") == str(inner)

    def test_none_when_not_inside_an_app(self, tmp_path: Path):
        (tmp_path / "src").mkdir()
        assert find_enclosing_app(tmp_path / "src") is None


class TestSelectActiveApp:
    @pytest.fixture
    def root(self, tmp_path: Path) -> Path:
        return tmp_path.resolve()

    def test_empty(self, root: Path):
        assert select_active_app([], root) is None

    def test_cwd_equals_app(self, root: Path):
        a, b = str(root / "a"), str(root / "b")
        assert select_active_app([a, b], root / "b") == b

    def test_cwd_inside_app(self, root: Path):
        a, b = str(root / "a"), str(root / "b")
        assert select_active_app([a, b], root / "b" / "src" / "app") == b

    def test_deepest_containing_app_wins(self, root: Path):
        site = str(root / "packages" / "site")
        assert select_active_app([str(root), site], root / "packages" / "site" / "app") == site

    def test_prefix_is_path_aware(self, root: Path):
        app, app2 = str(root / "app"), str(root / "app2")
        assert select_active_app([app, app2], root / "app2") == app2
        assert select_active_app([app], root / "app2") == app

    def test_fallback_to_first(self, root: Path):
        a, b = str(root / "a"), str(root / "b")
        assert select_active_app([a, b], root / "elsewhere") == a
