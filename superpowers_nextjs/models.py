"""Data models for the detected project context."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

PLUGIN_NAME = "superpowers-nextjs"


@dataclass
class NextjsInfo:
    version: str = "unknown"  # "major.minor" | "unknown"
    router: str = "unknown"  # "app" | "pages" | "hybrid" | "unknown"
    is_latest: bool = False


@dataclass
class TypeScriptInfo:
    enabled: bool = False
    strict: bool = False


@dataclass
class PackageManager:
    name: str = "npm"  # "npm" | "yarn" | "pnpm" | "bun"
    command: str = "npm"


@dataclass
class Commands:
    dev: str
    build: str
    test: str
    lint: str


@dataclass
class ProjectContext:
    """Everything the session-start hook reports about the active app."""

    detected_apps: int
    active_app: str
    nextjs: NextjsInfo
    typescript: TypeScriptInfo
    package_manager: PackageManager
    devtools_mcp_configured: bool
    test_framework: str  # "none" | "jest" | "vitest" | "playwright" | "<primary>+playwright"
    styling: str  # "css" | "tailwind" | "styled-components" | "emotion"
    commands: Commands
    guidance: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialise in the key order of the hook's output contract."""
        return {
            "plugin": PLUGIN_NAME,
            "detected_apps": self.detected_apps,
            "active_app": self.active_app,
            "nextjs": {
                "version": self.nextjs.version,
                "router": self.nextjs.router,
                "is_latest": self.nextjs.is_latest,
            },
            "typescript": {
                "enabled": self.typescript.enabled,
                "strict": self.typescript.strict,
            },
            "package_manager": {
                "name": self.package_manager.name,
                "command": self.package_manager.command,
            },
            "devtools_mcp": {
                "configured": self.devtools_mcp_configured,
            },
            "test_framework": self.test_framework,
            "styling": self.styling,
            "commands": {
                "dev": self.commands.dev,
                "build": self.commands.build,
                "test": self.commands.test,
                "lint": self.commands.lint,
            },
            "guidance": self.guidance,
        }
