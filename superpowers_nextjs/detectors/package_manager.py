"""Package manager detection from lockfiles."""

from __future__ import annotations

from pathlib import Path

from superpowers_nextjs.detectors.registry import register_detector
from superpowers_nextjs.manifest import Manifest, is_file_safe
from superpowers_nextjs.models import PackageManager

# Detection rules: (lockfile, manager name, invocation command)
# Ordered by priority
LOCKFILE_RULES: list[tuple[str, str, str]] = [
    ("bun.lockb", "bun", "bun"),
    ("bun.lock", "bun", "bun"),
    ("pnpm-lock.yaml", "pnpm", "pnpm"),
    ("yarn.lock", "yarn", "yarn"),
    ("package-lock.json", "npm", "npm"),
]


class PackageManagerDetector:
    name = "package_manager"

    def detect(self, app_dir: Path, manifest: Manifest | None) -> PackageManager:
        for lockfile, pm_name, pm_command in LOCKFILE_RULES:
            if is_file_safe(app_dir / lockfile):
                return PackageManager(name=pm_name, command=pm_command)
        return PackageManager()


register_detector(PackageManagerDetector())
