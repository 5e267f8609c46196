"""TypeScript detection: tsconfig.json presence and strict mode."""

from __future__ import annotations

import re
from pathlib import Path

from superpowers_nextjs.detectors.registry import register_detector
from superpowers_nextjs.manifest import Manifest, is_file_safe, read_text_safe
from superpowers_nextjs.models import TypeScriptInfo

TSCONFIG_NAME = "tsconfig.json"

# Matched on raw text: tsconfig allows comments and trailing commas.
_STRICT_RE = re.compile(r'"strict"\s*:\s*true')


class TypeScriptDetector:
    name = "typescript"

    def detect(self, app_dir: Path, manifest: Manifest | None) -> TypeScriptInfo:
        tsconfig = app_dir / TSCONFIG_NAME
        if not is_file_safe(tsconfig):
            return TypeScriptInfo()
        content = read_text_safe(tsconfig) or ""
        return TypeScriptInfo(enabled=True, strict=bool(_STRICT_RE.search(content)))


register_detector(TypeScriptDetector())
