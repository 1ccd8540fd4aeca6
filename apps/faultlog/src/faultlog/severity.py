"""Runtime error codes and their log labels."""

from __future__ import annotations

from enum import IntFlag, StrEnum


class ErrorCode(IntFlag):
    FATAL = 1
    WARNING = 2
    NOTICE = 4
    USER_ERROR = 8
    USER_WARNING = 16
    USER_NOTICE = 32
    STRICT = 64
    RECOVERABLE_ERROR = 128
    DEPRECATED = 256
    USER_DEPRECATED = 512
    ALL = 1023


class Severity(StrEnum):
    DEPRECATED = "DEPRECATED"
    NOTICE = "NOTICE"
    FATAL = "FATAL"
    STRICT = "STRICT"
    USER_ERROR = "USER_ERROR"
    USER_WARNING = "USER_WARNING"
    WARNING = "WARNING"
    EXCEPTION = "EXCEPTION"
    ERROR = "ERROR"


_LABELS: dict[int, Severity] = {
    ErrorCode.DEPRECATED: Severity.DEPRECATED,
    ErrorCode.USER_DEPRECATED: Severity.DEPRECATED,
    ErrorCode.NOTICE: Severity.NOTICE,
    ErrorCode.USER_NOTICE: Severity.NOTICE,
    ErrorCode.FATAL: Severity.FATAL,
    ErrorCode.STRICT: Severity.STRICT,
    ErrorCode.USER_ERROR: Severity.USER_ERROR,
    ErrorCode.USER_WARNING: Severity.USER_WARNING,
    ErrorCode.WARNING: Severity.WARNING,
}

_WARNING_CODES: dict[type[Warning], ErrorCode] = {
    DeprecationWarning: ErrorCode.DEPRECATED,
    PendingDeprecationWarning: ErrorCode.DEPRECATED,
    FutureWarning: ErrorCode.USER_DEPRECATED,
    SyntaxWarning: ErrorCode.STRICT,
    ResourceWarning: ErrorCode.NOTICE,
    ImportWarning: ErrorCode.NOTICE,
    UserWarning: ErrorCode.USER_WARNING,
    Warning: ErrorCode.WARNING,
}


def coerce_code(code: object) -> int | None:
    """Return `code` as an int, or None when it is not a number."""
    try:
        return int(code)  # type: ignore[call-overload]
    except (TypeError, ValueError):
        return None


def classify(code: int | None) -> Severity:
    """Return the label for a runtime error code; unknown codes are ERROR."""
    value = coerce_code(code)
    if value is None:
        return Severity.ERROR
    return _LABELS.get(value, Severity.ERROR)


def is_notice(code: int) -> bool:
    return classify(code) is Severity.NOTICE


def code_for_warning(category: type[Warning]) -> ErrorCode:
    """Map a warning category onto the closest runtime error code."""
    for klass in getattr(category, "__mro__", ()):
        code = _WARNING_CODES.get(klass)
        if code is not None:
            return code
    return ErrorCode.WARNING
