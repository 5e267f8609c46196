"""Styling system detection."""

from __future__ import annotations

from pathlib import Path

from superpowers_nextjs.detectors.registry import register_detector
from superpowers_nextjs.manifest import Manifest, is_file_safe

TAILWIND_CONFIGS = ["tailwind.config.js", "tailwind.config.ts", "tailwind.config.mjs"]

# (package, styling); checked in order after the Tailwind config files
STYLING_LIBRARIES: list[tuple[str, str]] = [
    ("styled-components", "styled-components"),
    ("@emotion/react", "emotion"),
]


class StylingDetector:
    name = "styling"

    def detect(self, app_dir: Path, manifest: Manifest | None) -> str:
        if any(is_file_safe(app_dir / name) for name in TAILWIND_CONFIGS):
            return "tailwind"
        if manifest is not None:
            for package, styling in STYLING_LIBRARIES:
                if manifest.has_dependency(package):
                    return styling
        return "css"


register_detector(StylingDetector())
