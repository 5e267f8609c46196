"""Router type classification: App Router, Pages Router, or both."""

from __future__ import annotations

from pathlib import Path

from superpowers_nextjs.detectors.registry import register_detector
from superpowers_nextjs.manifest import Manifest, is_dir_safe

# Convention directory -> locations checked relative to the app root
ROUTER_DIRS: dict[str, list[str]] = {
    "app": ["app", "src/app"],
    "pages": ["pages", "src/pages"],
}


class RouterDetector:
    name = "router"

    def detect(self, app_dir: Path, manifest: Manifest | None) -> str:
        found = {
            router
            for router, locations in ROUTER_DIRS.items()
            if any(is_dir_safe(app_dir / loc) for loc in locations)
        }
        if found == {"app", "pages"}:
            return "hybrid"
        if found:
            return found.pop()
        return "unknown"


register_detector(RouterDetector())
