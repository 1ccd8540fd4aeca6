"""Typed exceptions for faultlog."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .severity import Severity, classify


class FaultlogError(Exception):
    """Base exception for faultlog failures."""


class LogDestinationError(FaultlogError, OSError):
    """Raised when a log file or its directory cannot be opened or created."""


class RegistrationError(FaultlogError):
    """Raised when the capture hooks cannot be installed."""


class SettingsError(ValueError, FaultlogError):
    """Raised when a settings file is unreadable or invalid."""


class CapturedError(FaultlogError):
    """Re-signal of a logged, non-notice runtime error.

    Raised from the error hook after the event is written so the code that
    triggered it can catch it like any other exception.
    """

    def __init__(
        self,
        message: str,
        code: int | None,
        filename: str | None = None,
        lineno: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.filename = filename
        self.lineno = lineno

    @property
    def severity(self) -> Severity:
        return classify(self.code)


class StructuredError(Exception):
    """Exception carrying key/value context for the uncaught exception log."""

    def __init__(self, message: str, info: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.info: dict[str, Any] = dict(info or {})
