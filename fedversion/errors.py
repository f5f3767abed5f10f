"""Error definitions for fedversion."""

from __future__ import annotations


class FedVersionError(Exception):
    """Base class for all fedversion errors."""


class ConfigurationError(FedVersionError, ValueError):
    """Raised when a configuration value is invalid.

    Surfaces at controller startup; it is never retried or defaulted.
    """

    def __init__(self, message: str, value: object = None) -> None:
        super().__init__(message)
        self.value = value
