"""Literal constants used by faultlog."""

from pathlib import Path

# Column the category label is aligned against.
SPACER_WIDTH = 17

# Stack frames and structured exception info sit this far past the spacer.
FRAME_INDENT_OFFSET = 27
EXTRA_FRAME_INDENT = "    "

LOG_TIMESTAMP_FORMAT = "%m-%d-%y[%H:%M:%S]"

DEFAULT_CATEGORY = "undefined"

# First line of every newly created log file. A PHP-enabled web server that is
# asked for a log stored under its document root stops right here.
SENTINEL_LINE = "<?php exit; ?>"

EXCEPTION_LOG_NAME = "uncaught_exception_log.php"
FATAL_LOG_NAME = "fatal_log.php"

# Used for the well-known logs when no base directory is known.
DEFAULT_LOG_DIR = (Path(__file__).resolve().parent / ".." / ".." / "logs").resolve()

LOG_DIR_MODE = 0o775

MAX_SCALAR_CHARS = 80
TRUNCATION_MARKER = "..."

NO_EXCEPTION_DATA_TEXT = "No data provided for this exception"

ERROR_PREFIX = "ERROR:"
