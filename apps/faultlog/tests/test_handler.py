from __future__ import annotations

import logging

import pytest

from faultlog.diagnostics import LOGGER_NAME
from faultlog.handler import FaultLogHandler
from faultlog.logger import Logger
from test_helpers import FROZEN_STAMP, read_lines


@pytest.fixture
def app_logger(logger: Logger):
    handler = FaultLogHandler(logger)
    target = logging.getLogger("faultlog_tests.app")
    target.setLevel(logging.DEBUG)
    target.addHandler(handler)
    try:
        yield target
    finally:
        target.removeHandler(handler)


def _divide(a, b):
    return a / b


def test_record_is_written_with_level_as_category(
    frozen_time, app_logger: logging.Logger, log_path
) -> None:
    app_logger.info("hello %s", "world")

    assert read_lines(log_path)[1] == f"{FROZEN_STAMP}" + " " * 14 + "[INFO] hello world"


def test_own_diagnostics_are_not_forwarded(logger: Logger, log_path) -> None:
    handler = FaultLogHandler(logger)
    own = logging.getLogger(LOGGER_NAME)
    child = logging.getLogger(f"{LOGGER_NAME}.sink")
    own.addHandler(handler)
    try:
        own.warning("loop")
        child.warning("loop")
    finally:
        own.removeHandler(handler)

    assert len(read_lines(log_path)) == 1


def test_formatter_is_used_when_set(logger: Logger, log_path) -> None:
    handler = FaultLogHandler(logger)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    target = logging.getLogger("faultlog_tests.formatted")
    target.setLevel(logging.INFO)
    target.addHandler(handler)
    try:
        target.warning("careful")
    finally:
        target.removeHandler(handler)

    assert read_lines(log_path)[1].endswith("[WARNING] faultlog_tests.formatted: careful")


def test_exc_info_adds_stack_lines(app_logger: logging.Logger, log_path) -> None:
    try:
        _divide(1, 0)
    except ZeroDivisionError:
        app_logger.exception("division failed")

    lines = read_lines(log_path)
    assert lines[1].endswith("[ERROR] division failed")
    assert lines[2].lstrip().startswith('From: _divide("1", "0") Called at [')


def test_level_filters_records(logger: Logger, log_path) -> None:
    handler = FaultLogHandler(logger, level=logging.WARNING)
    target = logging.getLogger("faultlog_tests.filtered")
    target.setLevel(logging.DEBUG)
    target.addHandler(handler)
    try:
        target.info("ignored")
        target.error("kept")
    finally:
        target.removeHandler(handler)

    lines = read_lines(log_path)
    assert len(lines) == 2
    assert lines[1].endswith("[ERROR] kept")
