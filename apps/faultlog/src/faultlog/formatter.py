"""Fixed-width line layout for log entries."""

from __future__ import annotations

from datetime import datetime

from .constants import (
    DEFAULT_CATEGORY,
    EXTRA_FRAME_INDENT,
    FRAME_INDENT_OFFSET,
    SPACER_WIDTH,
)
from .models import LogLine
from .timestamps import format_log_timestamp


def padding(label: str, width: int = SPACER_WIDTH) -> str:
    """Spaces that align `[label]` against the spacer column; never empty."""
    return " " * max(1, width - len(label) + 1)


def frame_indent(width: int = SPACER_WIDTH, extra: bool = False) -> str:
    indent = " " * (width + FRAME_INDENT_OFFSET)
    return indent + EXTRA_FRAME_INDENT if extra else indent


def format_line(
    message: str,
    category: str = DEFAULT_CATEGORY,
    *,
    width: int = SPACER_WIDTH,
    moment: datetime | None = None,
) -> str:
    label = str(category).upper()
    return (
        f"{format_log_timestamp(moment)}{padding(label, width)}[{label}] {message}"
    )


def format_custom_line(
    message: str,
    *,
    width: int = SPACER_WIDTH,
    moment: datetime | None = None,
) -> str:
    return f"{format_log_timestamp(moment)}{' ' * (width + 1)}{message}"


def render_log_line(line: LogLine, *, width: int = SPACER_WIDTH) -> str:
    """Render a LogLine; context pairs trail the message as key=value."""
    text = format_line(line.message, line.category, width=width, moment=line.timestamp)
    if line.context:
        pairs = " ".join(f"{key}={value}" for key, value in line.context.items())
        text = f"{text} {pairs}"
    return text
