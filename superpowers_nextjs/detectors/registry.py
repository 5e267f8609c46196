"""Detector registry — every detector registers itself here on import."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from superpowers_nextjs.exceptions import DetectorNotFoundError
from superpowers_nextjs.manifest import Manifest


@runtime_checkable
class Detector(Protocol):
    """Interface that every detector must satisfy.

    ``detect`` must not raise for missing or malformed files; it returns the
    detector's documented default instead.
    """

    name: str

    def detect(self, app_dir: Path, manifest: Manifest | None) -> Any: ...


DETECTOR_REGISTRY: dict[str, Detector] = {}


def register_detector(detector: Detector) -> None:
    """Register a detector instance by its name."""
    DETECTOR_REGISTRY[detector.name] = detector


def get_detector(name: str) -> Detector:
    try:
        return DETECTOR_REGISTRY[name]
    except KeyError:
        raise DetectorNotFoundError(
            f"No detector named '{name}' (registered: {sorted(DETECTOR_REGISTRY)})"
        ) from None


def run_detectors(app_dir: Path, manifest: Manifest | None = None) -> dict[str, Any]:
    """Run every registered detector against one app directory.

    Returns a mapping of detector name to its result.
    """
    if manifest is None:
        manifest = Manifest.load(app_dir)
    return {name: detector.detect(app_dir, manifest) for name, detector in DETECTOR_REGISTRY.items()}
