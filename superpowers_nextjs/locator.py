"""Locate Next.js apps in a directory tree."""

from __future__ import annotations

import os
from pathlib import Path

import structlog

from superpowers_nextjs.manifest import MANIFEST_NAME, Manifest, is_file_safe

log = structlog.get_logger("superpowers_nextjs.locator")

FRAMEWORK_PACKAGE = "next"

# Never descended into during the downward scan.
EXCLUDED_DIRS = frozenset({"node_modules", ".git"})


def is_nextjs_app(app_dir: Path) -> bool:
    """True when ``app_dir/package.json`` declares a dependency on Next.js."""
    manifest = Manifest.load(app_dir)
    return manifest is not None and manifest.has_dependency(FRAMEWORK_PACKAGE)


def locate_apps(search_root: str | Path) -> list[str]:
    """Find every directory under ``search_root`` holding a Next.js package.json.

    Directories are visited top-down with sorted names, so the result order is
    stable across runs. Unreadable directories are skipped.
    """
    root = Path(search_root).resolve()
    apps: list[str] = []

    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if d not in EXCLUDED_DIRS)
        if MANIFEST_NAME in filenames and is_nextjs_app(Path(dirpath)):
            log.debug("locator.app_found", path=dirpath)
            apps.append(dirpath)

    return apps


def find_enclosing_app(start: str | Path) -> str | None:
    """Walk up from ``start`` and return the nearest enclosing Next.js app.

    Used when a session begins inside an app (e.g. in ``src/components``)
    and the downward scan sees no package.json.
    """
    current = Path(start).resolve()
    for candidate in (current, *current.parents):
        if is_file_safe(candidate / MANIFEST_NAME) and is_nextjs_app(candidate):
            log.debug("locator.enclosing_app_found", path=str(candidate))
            return str(candidate)
    return None


def select_active_app(apps: list[str], cwd: str | Path) -> str | None:
    """Pick the app containing ``cwd`` (deepest wins), else the first located."""
    if not apps:
        return None

    cwd_path = Path(cwd).resolve()
    containing = [
        app for app in apps if Path(app) == cwd_path or Path(app) in cwd_path.parents
    ]
    if containing:
        return max(containing, key=lambda app: len(Path(app).parts))
    return apps[0]
