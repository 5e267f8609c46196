"""Project detectors — auto-registered on import."""

from superpowers_nextjs.detectors import (
    devtools,  # noqa: F401
    package_manager,  # noqa: F401
    router,  # noqa: F401
    styling,  # noqa: F401
    test_framework,  # noqa: F401
    typescript,  # noqa: F401
    version,  # noqa: F401
)
