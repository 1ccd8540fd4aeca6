"""Dataclasses shared across faultlog layers."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Union


class CallOperator(Enum):
    INSTANCE = "."
    STATIC = "::"


@dataclass(frozen=True)
class StackFrame:
    function: str
    args: tuple[Any, ...] = ()
    owner: str | None = None
    call_operator: CallOperator | None = None
    # Where the function was called from, not where it is executing.
    filename: str | None = None
    lineno: int | None = None

    @property
    def has_call_site(self) -> bool:
        return self.filename is not None and self.lineno is not None


@dataclass(frozen=True)
class LogLine:
    timestamp: datetime
    category: str
    message: str
    context: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class RuntimeSignal:
    code: int
    message: str
    filename: str | None
    lineno: int | None


@dataclass(frozen=True)
class UncaughtException:
    message: str
    filename: str | None
    lineno: int | None
    frames: list[StackFrame]
    # None when the exception carries no info mapping at all.
    info: Mapping[str, Any] | None = None


@dataclass(frozen=True)
class FatalCrash:
    last_error: RuntimeSignal | None


CapturedEvent = Union[RuntimeSignal, UncaughtException, FatalCrash]
