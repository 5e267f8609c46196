"""Build the session context for the active Next.js app."""

from __future__ import annotations

import json
from pathlib import Path

import structlog

# Ensure detectors are registered before any context is built.
import superpowers_nextjs.detectors  # noqa: F401
from superpowers_nextjs.detectors.registry import run_detectors
from superpowers_nextjs.locator import find_enclosing_app, locate_apps, select_active_app
from superpowers_nextjs.manifest import Manifest
from superpowers_nextjs.models import (
    Commands,
    NextjsInfo,
    PackageManager,
    ProjectContext,
)

log = structlog.get_logger("superpowers_nextjs.context")

LATEST_MAJORS = frozenset({"15", "16"})
DEVTOOLS_MAJOR = "16"

GUIDANCE_MIGRATE_APP_ROUTER = (
    "Consider migrating to App Router for Server Components and improved performance"
)
GUIDANCE_ENABLE_DEVTOOLS = (
    "Enable NextDevTools MCP for enhanced debugging: add mcpServer: true to next.config"
)


def _major(version: str) -> str | None:
    head = version.split(".", 1)[0]
    return head if head.isdigit() else None


def is_latest_version(version: str) -> bool:
    return _major(version) in LATEST_MAJORS


def derive_commands(package_manager: PackageManager) -> Commands:
    if package_manager.name == "bun":
        # bun runs scripts without `run`, except build which would hit `bun build`
        return Commands(dev="bun dev", build="bun run build", test="bun test", lint="bun lint")
    cmd = package_manager.command
    return Commands(
        dev=f"{cmd} run dev",
        build=f"{cmd} run build",
        test=f"{cmd} run test",
        lint=f"{cmd} run lint",
    )


def derive_guidance(router: str, version: str, devtools_configured: bool) -> str | None:
    """Pages Router migration advice wins; otherwise suggest devtools on 16.x."""
    if router == "pages":
        return GUIDANCE_MIGRATE_APP_ROUTER
    if not devtools_configured and _major(version) == DEVTOOLS_MAJOR:
        return GUIDANCE_ENABLE_DEVTOOLS
    return None


def find_apps(search_root: str | Path, cwd: str | Path) -> list[str]:
    """Locate apps below ``search_root``, falling back to the app enclosing ``cwd``."""
    apps = locate_apps(search_root)
    if not apps:
        enclosing = find_enclosing_app(cwd)
        if enclosing:
            apps = [enclosing]
    return apps


def build_context(search_root: str | Path, cwd: str | Path | None = None) -> ProjectContext | None:
    """Detect the active Next.js app and describe it.

    Args:
        search_root: Directory scanned for apps.
        cwd: Working directory used to pick the active app. Defaults to
            ``search_root``.

    Returns:
        ProjectContext, or None when no Next.js app is found.
    """
    cwd = cwd if cwd is not None else search_root
    apps = find_apps(search_root, cwd)
    if not apps:
        log.debug("context.no_apps", search_root=str(search_root))
        return None

    active_app = select_active_app(apps, cwd)
    if active_app is None:
        return None
    app_dir = Path(active_app)

    results = run_detectors(app_dir, Manifest.load(app_dir))

    version: str = results["version"]
    router: str = results["router"]
    package_manager: PackageManager = results["package_manager"]
    devtools_configured: bool = results["devtools_mcp"]

    ctx = ProjectContext(
        detected_apps=len(apps),
        active_app=active_app,
        nextjs=NextjsInfo(
            version=version,
            router=router,
            is_latest=is_latest_version(version),
        ),
        typescript=results["typescript"],
        package_manager=package_manager,
        devtools_mcp_configured=devtools_configured,
        test_framework=results["test_framework"],
        styling=results["styling"],
        commands=derive_commands(package_manager),
        guidance=derive_guidance(router, version, devtools_configured),
    )
    log.debug(
        "context.built",
        active_app=active_app,
        detected_apps=len(apps),
        version=version,
        router=router,
    )
    return ctx


def render_context(ctx: ProjectContext, *, compact: bool = False) -> str:
    """Serialise the context as the JSON document printed by the hook."""
    if compact:
        return json.dumps(ctx.to_dict(), separators=(",", ":")) + "\n"
    return json.dumps(ctx.to_dict(), indent=2) + "\n"
