"""Structured self-diagnostics emitted through stdlib logging."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any

LOGGER_NAME = "faultlog"

_logger = logging.getLogger(LOGGER_NAME)
_logger.addHandler(logging.NullHandler())


def _to_log_safe(value: Any) -> Any:
    """Convert values to JSON-serializable, log-safe representations."""
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, Path):
        return str(value)
    if isinstance(value, dict):
        return {str(k): _to_log_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [_to_log_safe(v) for v in value]
    return str(value)


def log_event(event: str, level: int = logging.INFO, **fields: Any) -> None:
    """Emit a structured diagnostics event. Never raises."""
    try:
        if not _logger.isEnabledFor(level):
            return
        payload = {
            "ts": datetime.now().astimezone().isoformat(),
            "event": event,
        }
        for key, value in fields.items():
            payload[key] = _to_log_safe(value)
        _logger.log(level, json.dumps(payload, ensure_ascii=False, separators=(",", ":")))
    except Exception:
        # Diagnostics must never break the capture path.
        return


def log_failure(event: str, error: BaseException, **fields: Any) -> None:
    log_event(
        event,
        level=logging.WARNING,
        error_type=type(error).__name__,
        error=error,
        **fields,
    )
