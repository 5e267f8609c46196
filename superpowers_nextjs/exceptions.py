"""Custom exceptions for superpowers-nextjs."""


class SuperpowersError(Exception):
    """Base exception for all superpowers-nextjs errors."""


class ConfigError(SuperpowersError):
    """Raised when environment configuration holds an unsupported value."""

    def __init__(self, variable: str, value: str, allowed: list[str]):
        self.variable = variable
        self.value = value
        self.allowed = allowed
        super().__init__(
            f"{variable}={value!r} is not supported (expected one of: {', '.join(allowed)})"
        )


class DetectorNotFoundError(SuperpowersError):
    """Raised when a detector name is not present in the registry."""
