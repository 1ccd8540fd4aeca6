"""Wiring between capture hooks and the interpreter's failure channels."""

from __future__ import annotations

from collections.abc import Callable
import atexit
import sys
import threading
import traceback
import warnings
from typing import Protocol

from .models import RuntimeSignal
from .severity import ErrorCode, code_for_warning
from .stack import describe_exception

ErrorHook = Callable[[int, str, str | None, int | None], None]
ExceptionHook = Callable[[BaseException], None]
ShutdownHook = Callable[[], None]


class HostRuntime(Protocol):
    """Registration primitives a Logger installs its hooks through."""

    @property
    def reporting_level(self) -> int: ...

    def set_error_hook(self, hook: ErrorHook) -> None: ...

    def set_exception_hook(self, hook: ExceptionHook) -> None: ...

    def set_shutdown_hook(self, hook: ShutdownHook) -> None: ...

    def set_reporting_level(self, level: int) -> None: ...

    def last_error(self) -> RuntimeSignal | None: ...


class PythonRuntime:
    """HostRuntime backed by warnings, sys/threading excepthooks and atexit.

    Hook installation is process-global; nothing here can be undone.
    """

    def __init__(self) -> None:
        self._reporting_level = int(ErrorCode.ALL)
        self._last_error: RuntimeSignal | None = None

    @property
    def reporting_level(self) -> int:
        return self._reporting_level

    def set_reporting_level(self, level: int) -> None:
        self._reporting_level = int(level)

    def last_error(self) -> RuntimeSignal | None:
        return self._last_error

    def record_error(self, signal: RuntimeSignal) -> None:
        if signal.code & self._reporting_level:
            self._last_error = signal

    def record_exception(self, exc: BaseException) -> None:
        filename: str | None = None
        lineno: int | None = None
        entries = list(traceback.walk_tb(exc.__traceback__))
        if entries:
            frame, lineno = entries[-1]
            filename = frame.f_code.co_filename
        self.record_error(
            RuntimeSignal(
                code=int(ErrorCode.FATAL),
                message=f"Uncaught {describe_exception(exc)}",
                filename=filename,
                lineno=lineno,
            )
        )

    def set_error_hook(self, hook: ErrorHook) -> None:
        def _handle_error_from_warning(
            message, category, filename, lineno, file=None, line=None
        ) -> None:
            signal = RuntimeSignal(
                code=int(code_for_warning(category)),
                message=str(message),
                filename=filename,
                lineno=lineno,
            )
            self.record_error(signal)
            hook(signal.code, signal.message, signal.filename, signal.lineno)

        warnings.showwarning = _handle_error_from_warning
        # The reporting level is the only mask; the default filters would drop
        # deprecations outside __main__ and repeats from the same location.
        warnings.simplefilter("always")

    def set_exception_hook(self, hook: ExceptionHook) -> None:
        previous_excepthook = sys.excepthook

        def _handle_exception_from_excepthook(exc_type, exc_value, exc_tb) -> None:
            if issubclass(exc_type, KeyboardInterrupt):
                previous_excepthook(exc_type, exc_value, exc_tb)
                return
            exc = _materialize(exc_type, exc_value, exc_tb)
            self.record_exception(exc)
            hook(exc)

        def _handle_exception_from_thread(args: threading.ExceptHookArgs) -> None:
            if args.exc_type is SystemExit:
                return
            exc = _materialize(args.exc_type, args.exc_value, args.exc_traceback)
            self.record_exception(exc)
            hook(exc)

        sys.excepthook = _handle_exception_from_excepthook
        threading.excepthook = _handle_exception_from_thread

    def set_shutdown_hook(self, hook: ShutdownHook) -> None:
        def _handle_shutdown_at_exit() -> None:
            hook()

        atexit.register(_handle_shutdown_at_exit)


def _materialize(exc_type, exc_value, exc_tb) -> BaseException:
    if exc_value is None:
        exc_value = exc_type()
    if exc_value.__traceback__ is None and exc_tb is not None:
        exc_value = exc_value.with_traceback(exc_tb)
    return exc_value
