"""The single open log destination."""

from __future__ import annotations

import threading
from pathlib import Path
from typing import TextIO

from .constants import LOG_DIR_MODE, SENTINEL_LINE
from .diagnostics import log_event, log_failure
from .errors import LogDestinationError


def collapse_line_breaks(text: str) -> str:
    """Fold CR+LF, CR and LF into single spaces so one event stays on one line."""
    return text.replace("\r\n", " ").replace("\r", " ").replace("\n", " ")


class LogSink:
    """Owns one append-mode text stream; switching closes the previous one."""

    def __init__(self, sentinel_line: str = SENTINEL_LINE) -> None:
        self._sentinel_line = sentinel_line
        self._stream: TextIO | None = None
        self._path: Path | None = None
        self.lock = threading.RLock()

    @property
    def path(self) -> Path | None:
        return self._path

    @property
    def closed(self) -> bool:
        return self._stream is None

    def open(self, path: Path | str) -> None:
        path_abs = Path(path).expanduser().resolve()
        with self.lock:
            if self._stream is not None:
                raise LogDestinationError(
                    f"Log destination already open: {self._path}"
                )
            try:
                path_abs.parent.mkdir(mode=LOG_DIR_MODE, parents=True, exist_ok=True)
            except OSError as exc:
                raise LogDestinationError(
                    f"Failed to create log directory: {path_abs.parent}"
                ) from exc

            is_new = not path_abs.exists()
            try:
                stream = open(path_abs, "w" if is_new else "a", encoding="utf-8")
            except OSError as exc:
                raise LogDestinationError(f"Failed to open log file: {path_abs}") from exc

            self._stream = stream
            self._path = path_abs
            if is_new:
                self.write_line(self._sentinel_line)
            log_event("destination_open", path=path_abs, created=is_new)

    def switch_to(self, path: Path | str) -> None:
        with self.lock:
            self.close()
            self.open(path)

    def write_line(self, text: str) -> None:
        """Write one physical line. Failures are reported, never raised."""
        with self.lock:
            if self._stream is None:
                log_event("line_dropped", reason="destination_closed")
                return
            try:
                self._stream.write(collapse_line_breaks(text) + "\n")
                self._stream.flush()
            except (OSError, ValueError) as exc:
                log_failure("line_write_failed", exc, path=self._path)

    def close(self) -> None:
        with self.lock:
            stream, self._stream = self._stream, None
            if stream is None:
                return
            try:
                stream.close()
            except OSError as exc:
                log_failure("destination_close_failed", exc, path=self._path)
