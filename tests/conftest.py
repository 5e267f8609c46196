"""Shared pytest fixtures for superpowers-nextjs tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest


@pytest.fixture
def make_app(tmp_path: Path):
    """Factory building a throwaway Next.js app on disk.

    ``make_app("web", deps={"next": "^15.2.3"}, files={"yarn.lock": "..."},
    dirs=["app"])`` returns the resolved app directory.
    """

    def _make(
        rel: str = ".",
        *,
        deps: dict[str, str] | None = None,
        dev_deps: dict[str, str] | None = None,
        files: dict[str, str] | None = None,
        dirs: list[str] | None = None,
    ) -> Path:
        app_dir = (tmp_path / rel).resolve()
        app_dir.mkdir(parents=True, exist_ok=True)
        manifest: dict = {
            "name": app_dir.name,
            "dependencies": deps if deps is not None else {"next": "^15.2.3"},
        }
        if dev_deps:
            manifest["devDependencies"] = dev_deps
        (app_dir / "package.json").write_text(json.dumps(manifest, indent=2))
        for name, content in (files or {}).items():
            target = app_dir / name
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content)
        for name in dirs or []:
            (app_dir / name).mkdir(parents=True, exist_ok=True)
        return app_dir

    return _make
