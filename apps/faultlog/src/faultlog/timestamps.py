"""Timestamp helpers for log lines."""

from __future__ import annotations

from datetime import datetime

from .constants import LOG_TIMESTAMP_FORMAT


def local_now() -> datetime:
    return datetime.now()


def format_log_timestamp(moment: datetime | None = None) -> str:
    """Render `moment` (default: now, local time) as MM-DD-YY[HH:MM:SS]."""
    if moment is None:
        moment = local_now()
    elif moment.tzinfo is not None:
        moment = moment.astimezone()
    return moment.strftime(LOG_TIMESTAMP_FORMAT)
