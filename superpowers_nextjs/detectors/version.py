"""Next.js version detection from lockfiles, falling back to package.json."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Callable

import structlog
import yaml

from superpowers_nextjs.detectors.registry import register_detector
from superpowers_nextjs.manifest import Manifest, load_json_safe, read_text_safe

log = structlog.get_logger("superpowers_nextjs.detectors.version")

UNKNOWN = "unknown"

_MAJOR_MINOR_RE = re.compile(r"^(\d+)\.(\d+)")

# Range operators and whitespace in front of the version, e.g. "^15.2.3", ">= 14.1"
_RANGE_PREFIX_RE = re.compile(r"^[\s^~=<>v]+")

# yarn.lock entry header naming next: `next@^15.0.0:`, `"next@npm:15.2.3":`,
# `"next@^14", "next@^14.1.0":`
_YARN_HEADER_RE = re.compile(r'^"?next@')
_YARN_VERSION_RE = re.compile(r'^\s+version:?\s+"?([^"\s]+)"?')


def major_minor(raw: Any) -> str | None:
    """Reduce a version string to "major.minor", or None if it has no such prefix."""
    if not isinstance(raw, str):
        return None
    m = _MAJOR_MINOR_RE.match(raw.strip())
    return f"{m.group(1)}.{m.group(2)}" if m else None


def from_package_lock(app_dir: Path) -> str | None:
    data = load_json_safe(app_dir / "package-lock.json")
    if not isinstance(data, dict):
        return None

    # lockfileVersion 2/3 keep "packages", lockfileVersion 1 keeps "dependencies"
    for section, key in (("packages", "node_modules/next"), ("dependencies", "next")):
        block = data.get(section)
        entry = block.get(key) if isinstance(block, dict) else None
        if isinstance(entry, dict):
            version = major_minor(entry.get("version"))
            if version:
                return version
    return None


def from_yarn_lock(app_dir: Path) -> str | None:
    content = read_text_safe(app_dir / "yarn.lock")
    if content is None:
        return None

    in_next_entry = False
    for line in content.splitlines():
        if not line.strip() or line.lstrip().startswith("#"):
            continue
        if not line[0].isspace():
            in_next_entry = bool(_YARN_HEADER_RE.match(line))
            continue
        if in_next_entry:
            m = _YARN_VERSION_RE.match(line)
            if m:
                return major_minor(m.group(1))
    return None


def _pnpm_entry_version(entry: Any) -> str | None:
    # v5: `next: 13.4.0`; v6+: `next: {specifier: ^15.0.0, version: 15.2.3(react@19.0.0)}`
    if isinstance(entry, dict):
        entry = entry.get("version")
    if isinstance(entry, (int, float)):
        entry = str(entry)
    return major_minor(entry)


def _pnpm_deps_version(block: Any) -> str | None:
    if not isinstance(block, dict):
        return None
    for section in ("dependencies", "devDependencies"):
        deps = block.get(section)
        if isinstance(deps, dict) and "next" in deps:
            version = _pnpm_entry_version(deps["next"])
            if version:
                return version
    return None


def from_pnpm_lock(app_dir: Path) -> str | None:
    content = read_text_safe(app_dir / "pnpm-lock.yaml")
    if content is None:
        return None
    try:
        data = yaml.safe_load(content)
    except (yaml.YAMLError, RecursionError, ValueError) as exc:
        log.debug("version.pnpm_lock_invalid", error=str(exc))
        return None
    if not isinstance(data, dict):
        return None

    importers = data.get("importers")
    if isinstance(importers, dict):
        ordered = [importers.get(".")] + [v for k, v in importers.items() if k != "."]
        for importer in ordered:
            version = _pnpm_deps_version(importer)
            if version:
                return version
    return _pnpm_deps_version(data)


def from_manifest(manifest: Manifest | None) -> str | None:
    if manifest is None:
        return None
    spec = manifest.dependency_spec("next")
    if spec is None:
        return None
    return major_minor(_RANGE_PREFIX_RE.sub("", spec))


# Ordered by priority; the first source yielding a version wins.
VERSION_SOURCES: list[tuple[str, Callable[[Path, Manifest | None], str | None]]] = [
    ("package-lock.json", lambda app_dir, _m: from_package_lock(app_dir)),
    ("yarn.lock", lambda app_dir, _m: from_yarn_lock(app_dir)),
    ("pnpm-lock.yaml", lambda app_dir, _m: from_pnpm_lock(app_dir)),
    ("package.json", lambda _d, manifest: from_manifest(manifest)),
]


class VersionDetector:
    name = "version"

    def detect(self, app_dir: Path, manifest: Manifest | None) -> str:
        for source, extract in VERSION_SOURCES:
            version = extract(app_dir, manifest)
            if version:
                log.debug("version.resolved", source=source, version=version)
                return version
        log.debug("version.unresolved", app=str(app_dir))
        return UNKNOWN


register_detector(VersionDetector())
