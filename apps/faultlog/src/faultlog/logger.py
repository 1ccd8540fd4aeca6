"""Process-wide diagnostic logger and its capture hooks."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
import inspect
import weakref
from pathlib import Path
from typing import Any

from .constants import DEFAULT_CATEGORY, DEFAULT_LOG_DIR, NO_EXCEPTION_DATA_TEXT
from .diagnostics import log_event, log_failure
from .errors import CapturedError, RegistrationError
from .formatter import format_custom_line, format_line, frame_indent, render_log_line
from .models import FatalCrash, LogLine, StackFrame, UncaughtException
from .pretty import pretty_value
from .runtime import HostRuntime, PythonRuntime
from .settings import LoggerSettings
from .severity import Severity, classify, coerce_code, is_notice
from .sink import LogSink
from .stack import capture_stack, exception_event, render_stack_trace
from .timestamps import local_now


class Logger:
    """Writes runtime errors, uncaught exceptions and fatal crashes to log files.

    Every logging call returns the logger so calls can be chained:

        Logger("logs/app.log").log_line("boot", "init").log_error("disk full")

    `register_error_handlers()` makes the logger the process's handler for
    warnings/error signals, uncaught exceptions and interpreter shutdown.
    """

    def __init__(
        self,
        log_file: Path | str,
        settings: LoggerSettings | None = None,
        runtime: HostRuntime | None = None,
    ) -> None:
        self.settings = settings if settings is not None else LoggerSettings()
        self.runtime: HostRuntime = runtime if runtime is not None else PythonRuntime()

        log_path = Path(log_file).expanduser().resolve()
        if self.settings.base_dir is not None:
            self.base_dir: Path | None = self.settings.base_dir.expanduser().resolve()
        else:
            self.base_dir = log_path.parent

        self._sink = LogSink(self.settings.sentinel_line)
        self._sink.open(log_path)
        self._finalizer = weakref.finalize(self, self._sink.close)
        self._registered = False

    def __enter__(self) -> Logger:
        return self

    def __exit__(self, exc_type, exc_value, exc_tb) -> None:
        self.close()

    @property
    def log_file(self) -> Path | None:
        return self._sink.path

    @property
    def registered(self) -> bool:
        return self._registered

    @property
    def width(self) -> int:
        return self.settings.spacer_width

    def close(self) -> None:
        self._finalizer()

    # Registration

    def register_error_handlers(self) -> Logger:
        """Install the error, exception and shutdown hooks. Runs once."""
        if self._registered:
            return self
        try:
            self.runtime.set_error_hook(self.handle_error)
            self.runtime.set_exception_hook(self.handle_exception)
            self.runtime.set_shutdown_hook(self.handle_shutdown)
            self.runtime.set_reporting_level(self.settings.reporting_level)
        except Exception as exc:
            raise RegistrationError(f"Failed to install capture hooks: {exc}") from exc

        self._registered = True
        log_event(
            "hooks_registered",
            log_file=self.log_file,
            reporting_level=self.settings.reporting_level,
        )
        return self

    def update_log_file(self, new_log_file: Path | str | None = "") -> Logger:
        if new_log_file:
            self._sink.switch_to(new_log_file)
        return self

    # Hooks

    def handle_error(
        self,
        code: int,
        message: str,
        filename: str | None = None,
        lineno: int | None = None,
    ) -> None:
        """Error hook. Raises CapturedError for everything but notices."""
        # Codes that are not numbers cannot be masked; they are logged as ERROR.
        value = coerce_code(code)
        if value is not None and not value & self.runtime.reporting_level:
            return
        try:
            self.log_error_handler(code, message, filename, lineno)
        except Exception as exc:
            log_failure("error_hook_failed", exc)
        if not is_notice(code):
            raise CapturedError(str(message), value, filename, lineno)

    def handle_exception(self, exc: BaseException) -> None:
        """Exception hook; writes to the uncaught exception log."""
        try:
            self.update_log_file(self._well_known_path(self.settings.exception_log_name))
            self.log_exception(exc)
        except Exception as failure:
            log_failure("exception_hook_failed", failure)

    def handle_shutdown(self) -> None:
        """Shutdown hook; writes the last known error to the fatal log."""
        try:
            self.update_log_file(self._well_known_path(self.settings.fatal_log_name))
            crash = FatalCrash(last_error=self.runtime.last_error())
            if crash.last_error is not None:
                signal = crash.last_error
                self.log_error_handler(
                    signal.code, signal.message, signal.filename, signal.lineno
                )
        except Exception as failure:
            log_failure("shutdown_hook_failed", failure)

    # Logging calls

    def log_line(
        self,
        message: str,
        category: str = DEFAULT_CATEGORY,
        context: Mapping[str, Any] | None = None,
    ) -> Logger:
        line = LogLine(
            timestamp=local_now(),
            category=str(category),
            message=str(message),
            context=dict(context or {}),
        )
        self._write(render_log_line(line, width=self.width))
        return self

    def log_custom_line(self, message: str) -> Logger:
        self._write(format_custom_line(str(message), width=self.width))
        return self

    def log_error(self, message: str) -> Logger:
        self._write(format_line(str(message), Severity.ERROR, width=self.width))
        return self

    def log_error_handler(
        self,
        code: int,
        message: str,
        filename: str | None,
        lineno: int | None,
    ) -> Logger:
        """Log an error signal followed by the stack of whoever reported it."""
        header = format_line(
            f"{message} In [{filename}:{lineno}]", classify(code), width=self.width
        )
        trace = render_stack_trace(
            capture_stack(inspect.currentframe().f_back), width=self.width
        )
        self._write(header, *trace)
        return self

    def log_stack_trace(
        self,
        frames: Iterable[StackFrame | None],
        extra_indent: bool = False,
    ) -> Logger:
        self._write(*render_stack_trace(frames, extra_indent, width=self.width))
        return self

    def log_exception(self, exc: BaseException) -> Logger:
        self._write(*self._exception_lines(exception_event(exc)))
        return self

    def log_fatal(self) -> Logger:
        signal = self.runtime.last_error()
        if signal is not None:
            self._write(
                format_line(
                    f"{signal.message} In [{signal.filename}:{signal.lineno}]",
                    Severity.FATAL,
                    width=self.width,
                )
            )
        return self

    # Internals

    def _exception_lines(self, event: UncaughtException) -> list[str]:
        lines = [
            format_line(
                f'{event.message}. In file "{event.filename}" on line {event.lineno}',
                Severity.EXCEPTION,
                width=self.width,
            )
        ]
        indent = frame_indent(self.width)
        if event.info:
            lines.extend(
                f"{indent}{key}: {pretty_value(value)}" for key, value in event.info.items()
            )
        else:
            lines.append(f"{indent}{NO_EXCEPTION_DATA_TEXT}")
        lines.extend(
            render_stack_trace(event.frames, event.info is not None, width=self.width)
        )
        return lines

    def _well_known_path(self, name: str) -> Path:
        base_dir = self.base_dir if self.base_dir is not None else DEFAULT_LOG_DIR
        return base_dir / name

    def _write(self, *lines: str) -> None:
        # One event's lines stay together when hooks fire on several threads.
        with self._sink.lock:
            for line in lines:
                self._sink.write_line(line)
