"""Configuration exceptions: settings, modes."""

from typing import Iterable

from .base import DeobfInsightError


class ConfigurationError(DeobfInsightError):
    """Base class for configuration-related errors."""

    pass


class UnknownModeError(ConfigurationError):
    """Raised when a deobfuscation mode name is not recognised."""

    def __init__(self, value: str, known_modes: Iterable[str]):
        known = list(known_modes)
        super().__init__(
            f"Unknown deobfuscation mode: {value}",
            details={"mode": value, "known": ", ".join(known)},
        )
        self.value = value
        self.known_modes = known
