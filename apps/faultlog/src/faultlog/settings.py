"""Logger configuration model and JSON loader."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .constants import (
    EXCEPTION_LOG_NAME,
    FATAL_LOG_NAME,
    SENTINEL_LINE,
    SPACER_WIDTH,
)
from .errors import SettingsError
from .severity import ErrorCode


class LoggerSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    spacer_width: int = Field(default=SPACER_WIDTH, ge=0)
    reporting_level: int = Field(default=int(ErrorCode.ALL), ge=0)
    sentinel_line: str = SENTINEL_LINE
    exception_log_name: str = Field(default=EXCEPTION_LOG_NAME, min_length=1)
    fatal_log_name: str = Field(default=FATAL_LOG_NAME, min_length=1)
    # Directory for the well-known logs; defaults to the log file's directory.
    base_dir: Path | None = None


def load_settings(path: Path | str) -> LoggerSettings:
    """Load settings from a JSON file."""
    settings_path = Path(path).expanduser()
    try:
        text = settings_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SettingsError(f"Failed to read settings file: {settings_path}") from exc

    try:
        return LoggerSettings.model_validate_json(text)
    except ValidationError as exc:
        raise SettingsError(f"Invalid settings file {settings_path}: {exc}") from exc
