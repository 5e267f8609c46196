"""NextDevTools MCP integration detection."""

from __future__ import annotations

from pathlib import Path

import structlog

from superpowers_nextjs.detectors.registry import register_detector
from superpowers_nextjs.manifest import Manifest, file_contains, is_file_safe

log = structlog.get_logger("superpowers_nextjs.detectors.devtools")

MCP_CONFIG_FILES = [".mcp.json", ".cursor/mcp.json"]
MCP_SERVER_NAME = "next-devtools"

# Only the first existing config file is inspected
NEXT_CONFIG_FILES = ["next.config.js", "next.config.mjs", "next.config.ts"]
NEXT_CONFIG_MARKER = "mcpServer"


class DevtoolsMcpDetector:
    name = "devtools_mcp"

    def detect(self, app_dir: Path, manifest: Manifest | None) -> bool:
        for rel in MCP_CONFIG_FILES:
            if file_contains(app_dir / rel, MCP_SERVER_NAME):
                log.debug("devtools.configured", source=rel)
                return True

        for rel in NEXT_CONFIG_FILES:
            config = app_dir / rel
            if is_file_safe(config):
                configured = file_contains(config, NEXT_CONFIG_MARKER)
                if configured:
                    log.debug("devtools.configured", source=rel)
                return configured
        return False


register_detector(DevtoolsMcpDetector())
