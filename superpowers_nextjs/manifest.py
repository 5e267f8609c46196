"""package.json access and best-effort file readers shared by the detectors."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import structlog

log = structlog.get_logger("superpowers_nextjs.manifest")

MANIFEST_NAME = "package.json"

DEPENDENCY_SECTIONS = (
    "dependencies",
    "devDependencies",
    "peerDependencies",
    "optionalDependencies",
)


def is_file_safe(path: Path) -> bool:
    try:
        return path.is_file()
    except OSError as exc:
        log.debug("manifest.stat_failed", path=str(path), error=str(exc))
        return False


def is_dir_safe(path: Path) -> bool:
    try:
        return path.is_dir()
    except OSError as exc:
        log.debug("manifest.stat_failed", path=str(path), error=str(exc))
        return False


def read_text_safe(path: Path) -> str | None:
    """Return the file content, or None when it is missing or unreadable."""
    try:
        if not path.is_file():
            return None
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        log.debug("manifest.read_failed", path=str(path), error=str(exc))
        return None


def load_json_safe(path: Path) -> Any | None:
    """Parse a JSON file, returning None when it is missing or malformed."""
    content = read_text_safe(path)
    if content is None:
        return None
    try:
        return json.loads(content)
    except (json.JSONDecodeError, RecursionError) as exc:
        log.debug("manifest.json_invalid", path=str(path), error=str(exc))
        return None


def file_contains(path: Path, marker: str) -> bool:
    content = read_text_safe(path)
    return content is not None and marker in content


def _declaration_re(name: str) -> re.Pattern[str]:
    return re.compile(r'"' + re.escape(name) + r'"\s*:\s*"([^"]*)"')


@dataclass
class Manifest:
    """The package.json of one app.

    ``data`` is None when the file is not valid JSON; lookups then fall back
    to matching ``"<name>": "<spec>"`` in the raw text.
    """

    path: Path
    text: str
    data: dict[str, Any] | None

    @classmethod
    def load(cls, app_dir: Path) -> Manifest | None:
        path = app_dir / MANIFEST_NAME
        text = read_text_safe(path)
        if text is None:
            return None
        try:
            data = json.loads(text)
        except (json.JSONDecodeError, RecursionError):
            log.debug("manifest.json_invalid", path=str(path))
            data = None
        if not isinstance(data, dict):
            data = None
        return cls(path=path, text=text, data=data)

    def dependency_spec(self, name: str) -> str | None:
        """Return the declared version range of ``name``, or None."""
        if self.data is None:
            m = _declaration_re(name).search(self.text)
            return m.group(1) if m else None

        for section in DEPENDENCY_SECTIONS:
            deps = self.data.get(section)
            if not isinstance(deps, dict):
                continue
            spec = deps.get(name)
            if isinstance(spec, str):
                return spec
        return None

    def has_dependency(self, name: str) -> bool:
        return self.dependency_spec(name) is not None
