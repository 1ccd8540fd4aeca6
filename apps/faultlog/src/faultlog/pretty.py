"""Short, failure-proof summaries of arbitrary values for stack frames."""

from __future__ import annotations

from collections.abc import Mapping, Sequence, Set
import io
import mmap
import numbers
import socket
from typing import Any

from .constants import MAX_SCALAR_CHARS, TRUNCATION_MARKER

ARRAY_TEXT = "(Array)"
OBJECT_TEXT = "(Object)"
RESOURCE_TEXT = "(Resource)"
NULL_TEXT = "(Null)"
TRUE_TEXT = "(True)"
FALSE_TEXT = "(False)"

_RESOURCE_TYPES = (io.IOBase, socket.socket, mmap.mmap)
_SCALAR_TYPES = (str, bytes, numbers.Number)


def pretty_value(value: Any) -> str:
    """Render `value` as one short token. Never raises."""
    try:
        return _render(value)
    except Exception:
        return _fallback(value)


def _render(value: Any) -> str:
    if value is None:
        return NULL_TEXT
    if isinstance(value, bool):
        return TRUE_TEXT if value else FALSE_TEXT
    if isinstance(value, _SCALAR_TYPES):
        return _quote(str(value))
    if isinstance(value, (Mapping, Sequence, Set, bytearray)):
        return ARRAY_TEXT
    if isinstance(value, _RESOURCE_TYPES):
        return RESOURCE_TEXT
    return OBJECT_TEXT


def _fallback(value: Any) -> str:
    try:
        return _quote(object.__repr__(value))
    except Exception:
        return OBJECT_TEXT


def _quote(text: str) -> str:
    if len(text) >= MAX_SCALAR_CHARS:
        text = text[:MAX_SCALAR_CHARS] + TRUNCATION_MARKER
    return f'"{text}"'
