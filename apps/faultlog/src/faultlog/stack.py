"""Stack frame capture and rendering."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
import inspect
import traceback
from types import FrameType, TracebackType
from typing import Any

from .constants import SPACER_WIDTH
from .formatter import frame_indent
from .models import CallOperator, StackFrame, UncaughtException
from .pretty import pretty_value

# Entry points of the capture hooks. Frames whose function name contains one
# of these (case-insensitive) are never rendered.
ERROR_HOOK_NAME = "handle_error"
EXCEPTION_HOOK_NAME = "handle_exception"
SHUTDOWN_HOOK_NAME = "handle_shutdown"
HOOK_FUNCTION_NAMES = (ERROR_HOOK_NAME, EXCEPTION_HOOK_NAME, SHUTDOWN_HOOK_NAME)

_MODULE_FRAME_NAME = "<module>"
_WARNINGS_MODULES = frozenset({"warnings", "_py_warnings"})


def is_hook_function(name: str) -> bool:
    lowered = name.lower()
    return any(hook in lowered for hook in HOOK_FUNCTION_NAMES)


def render_stack_trace(
    frames: Iterable[StackFrame | None],
    extra_indent: bool = False,
    *,
    width: int = SPACER_WIDTH,
) -> list[str]:
    """Render frames innermost first, one line each, without hook frames."""
    indent = frame_indent(width, extra_indent)
    lines: list[str] = []
    for frame in frames:
        if not isinstance(frame, StackFrame) or not frame.function:
            continue
        if is_hook_function(frame.function):
            continue
        lines.append(f"{indent}From: {render_frame(frame)}")
    return lines


def render_frame(frame: StackFrame) -> str:
    prefix = ""
    if frame.owner and frame.call_operator is not None:
        prefix = f"{frame.owner}{frame.call_operator.value}"
    args = ", ".join(pretty_value(arg) for arg in frame.args)
    text = f"{prefix}{frame.function}({args})"
    if frame.has_call_site:
        text += f" Called at [{frame.filename}:{frame.lineno}]"
    return text


def capture_stack(frame: FrameType | None) -> list[StackFrame]:
    """Snapshot the live stack starting at `frame`, innermost first.

    Stops at the first module-level frame; everything past it is interpreter
    or import machinery.
    """
    frames: list[StackFrame] = []
    while frame is not None and not _is_module_frame(frame):
        caller = frame.f_back
        if not _is_warnings_frame(frame):
            if caller is None:
                frames.append(_stack_frame(frame, None, None))
            else:
                frames.append(
                    _stack_frame(frame, caller.f_code.co_filename, caller.f_lineno)
                )
        frame = caller
    return frames


def frames_from_traceback(tb: TracebackType | None) -> list[StackFrame]:
    """Convert a traceback into frames, innermost first.

    When the exception was caught below module level, the frames that are
    still live above the catching frame are appended too.
    """
    entries = list(traceback.walk_tb(tb))
    frames: list[StackFrame] = []
    for index in range(len(entries) - 1, -1, -1):
        frame, _ = entries[index]
        if _is_module_frame(frame):
            return frames
        if index > 0:
            caller, caller_lineno = entries[index - 1]
            frames.append(_stack_frame(frame, caller.f_code.co_filename, caller_lineno))
        elif frame.f_back is not None:
            caller = frame.f_back
            frames.append(_stack_frame(frame, caller.f_code.co_filename, caller.f_lineno))
        else:
            frames.append(_stack_frame(frame, None, None))

    if entries:
        frames.extend(capture_stack(entries[0][0].f_back))
    return frames


def exception_event(exc: BaseException) -> UncaughtException:
    """Collect what the exception log needs from `exc`."""
    filename: str | None = None
    lineno: int | None = None
    entries = list(traceback.walk_tb(exc.__traceback__))
    if entries:
        innermost, lineno = entries[-1]
        filename = innermost.f_code.co_filename

    return UncaughtException(
        message=describe_exception(exc),
        filename=filename,
        lineno=lineno,
        frames=frames_from_traceback(exc.__traceback__),
        info=_exception_info(exc),
    )


def describe_exception(exc: BaseException) -> str:
    name = type(exc).__name__
    try:
        text = str(exc)
    except Exception:
        text = ""
    return f"{name}: {text}" if text else name


def _exception_info(exc: BaseException) -> Mapping[str, Any] | None:
    try:
        info = getattr(exc, "info", None)
        if isinstance(info, Mapping):
            return dict(info)
    except Exception:
        pass
    return None


def _is_module_frame(frame: FrameType) -> bool:
    return frame.f_code.co_name == _MODULE_FRAME_NAME


def _is_warnings_frame(frame: FrameType) -> bool:
    return frame.f_globals.get("__name__") in _WARNINGS_MODULES


def _stack_frame(
    frame: FrameType,
    filename: str | None,
    lineno: int | None,
) -> StackFrame:
    owner: str | None = None
    operator: CallOperator | None = None
    args: list[Any] = []
    try:
        arg_info = inspect.getargvalues(frame)
        names = list(arg_info.args)
        values = arg_info.locals
        if names and names[0] in ("self", "cls") and names[0] in values:
            bound = values[names[0]]
            if names[0] == "cls" and isinstance(bound, type):
                owner, operator = bound.__name__, CallOperator.STATIC
            else:
                owner, operator = type(bound).__name__, CallOperator.INSTANCE
            names = names[1:]
        args.extend(values[name] for name in names if name in values)
        if arg_info.varargs and arg_info.varargs in values:
            args.extend(values[arg_info.varargs])
        if arg_info.keywords and arg_info.keywords in values:
            args.extend(values[arg_info.keywords].values())
    except Exception:
        # Keep whatever was collected; a frame without args still helps.
        pass

    return StackFrame(
        function=frame.f_code.co_name,
        args=tuple(args),
        owner=owner,
        call_operator=operator,
        filename=filename,
        lineno=lineno,
    )
