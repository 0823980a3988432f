"""Exceptions raised by the Marzban SDK."""
from __future__ import annotations

from typing import Any


class MarzbanError(Exception):
    pass


class _InvalidInput(MarzbanError, ValueError):
    """Carries every ``(field, reason)`` pair found, the message joins them all."""

    prefix = "Invalid input"

    def __init__(self, violations: list[tuple[str, str]], prefix: str | None = None):
        self.violations = violations
        joined = ", ".join(f"{field}: {reason}" if field else reason for field, reason in violations)
        super().__init__(f"{prefix or self.prefix}: {joined}")


class ConfigurationError(_InvalidInput):
    """Client settings are invalid. Raised before any network activity."""

    prefix = "Invalid configuration"


class ValidationError(_InvalidInput):
    """A request payload does not satisfy its rule set. Nothing was sent."""

    prefix = "Validation Error"


class AuthenticationError(MarzbanError):
    pass


class TimeoutError(MarzbanError):
    """Request timed out on every attempt."""

    def __init__(self, message: str, attempts: int):
        self.attempts = attempts
        super().__init__(message)


class RemoteError(MarzbanError):
    """Non-timeout transport failure or non-success response."""

    def __init__(self, message: str, status_code: int | None = None, detail: Any = None):
        self.status_code = status_code
        self.detail = detail
        super().__init__(message)


class PreconditionError(MarzbanError):
    pass
