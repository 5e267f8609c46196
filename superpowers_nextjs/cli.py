"""CLI entry point: superpowers-nextjs.

Subcommands:
    superpowers-nextjs session-start           # Hook: print JSON context for the cwd
    superpowers-nextjs detect /path/to/repo    # Same detection against an explicit root
    superpowers-nextjs list-apps /path/to/repo # List every located Next.js app
"""

from __future__ import annotations

import os
from pathlib import Path

import click
import structlog

from superpowers_nextjs.context import build_context, find_apps, render_context
from superpowers_nextjs.core.config import Settings
from superpowers_nextjs.core.logging import setup_logging
from superpowers_nextjs.exceptions import ConfigError
from superpowers_nextjs.locator import select_active_app

log = structlog.get_logger("superpowers_nextjs.cli")


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging (stderr)")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """superpowers-nextjs: detect Next.js projects and describe them as JSON."""
    try:
        settings = Settings.from_env()
    except ConfigError as e:
        click.echo(f"Warning: {e}; using defaults", err=True)
        settings = Settings()
    setup_logging(settings, verbose=verbose)
    ctx.obj = settings


@main.command("session-start")
@click.pass_obj
def session_start(settings: Settings) -> None:
    """Session-start hook: print the context of the active app, if any.

    Prints nothing when no Next.js app is found. Always exits 0.
    """
    try:
        cwd = os.getcwd()
        search_root = settings.search_root or cwd
        log.debug(
            "cli.session_start",
            cwd=cwd,
            search_root=search_root,
            plugin_root=settings.plugin_root,
        )
        project = build_context(search_root, cwd)
    except Exception:
        # Hook contract: exit 0 with empty stdout whatever goes wrong.
        log.exception("cli.session_start_failed")
        return

    if project is None:
        return
    click.echo(render_context(project), nl=False)


@main.command("detect")
@click.argument("path", default=".", type=click.Path(exists=True, file_okay=False))
@click.option(
    "--cwd",
    "cwd",
    default=None,
    type=click.Path(exists=True, file_okay=False),
    help="Working directory used to pick the active app (default: PATH)",
)
@click.option("--compact", is_flag=True, help="Print the JSON on a single line")
def detect(path: str, cwd: str | None, compact: bool) -> None:
    """Detect Next.js apps under PATH and print the active app's context."""
    project = build_context(path, cwd or path)
    if project is None:
        return
    click.echo(render_context(project, compact=compact), nl=False)


@main.command("list-apps")
@click.argument("path", default=".", type=click.Path(exists=True, file_okay=False))
def list_apps(path: str) -> None:
    """List every Next.js app under PATH; the active one is marked with '*'."""
    apps = find_apps(path, path)
    active = select_active_app(apps, Path(path))
    for app in apps:
        marker = "*" if app == active else " "
        click.echo(f"{marker} {app}")


if __name__ == "__main__":
    main()
