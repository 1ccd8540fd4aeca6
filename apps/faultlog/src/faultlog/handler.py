"""stdlib logging bridge into a faultlog Logger."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .diagnostics import LOGGER_NAME
from .stack import frames_from_traceback

if TYPE_CHECKING:
    from .logger import Logger


class FaultLogHandler(logging.Handler):
    """Forward log records as `log_line(message, category=levelname)`.

    Records from faultlog's own diagnostics logger are ignored so a handler
    attached to the root logger cannot feed back into itself.
    """

    def __init__(self, target: Logger, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.target = target

    def emit(self, record: logging.LogRecord) -> None:
        if record.name == LOGGER_NAME or record.name.startswith(f"{LOGGER_NAME}."):
            return
        try:
            if self.formatter is None:
                message = record.getMessage()
            else:
                message = self.format(record)
            self.target.log_line(message, record.levelname)
            if record.exc_info and record.exc_info[2] is not None:
                self.target.log_stack_trace(frames_from_traceback(record.exc_info[2]))
        except Exception:
            self.handleError(record)
