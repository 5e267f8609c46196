"""superpowers-nextjs: Next.js project detection for AI coding-assistant sessions."""

__version__ = "0.1.0"

from superpowers_nextjs.context import build_context, render_context
from superpowers_nextjs.exceptions import ConfigError, DetectorNotFoundError, SuperpowersError
from superpowers_nextjs.locator import find_enclosing_app, locate_apps, select_active_app
from superpowers_nextjs.models import ProjectContext

__all__ = [
    "ConfigError",
    "DetectorNotFoundError",
    "ProjectContext",
    "SuperpowersError",
    "build_context",
    "find_enclosing_app",
    "locate_apps",
    "render_context",
    "select_active_app",
]
