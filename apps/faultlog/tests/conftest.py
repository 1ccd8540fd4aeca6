"""Pytest configuration and fixtures for faultlog tests."""

from __future__ import annotations

import atexit
import sys
import threading
import warnings
from pathlib import Path

import pytest

from faultlog.logger import Logger
from test_helpers import FROZEN_NOW, FakeRuntime


@pytest.fixture
def frozen_time():
    """Freeze time for consistent timestamps."""
    from freezegun import freeze_time

    with freeze_time(FROZEN_NOW):
        yield


@pytest.fixture
def fake_runtime() -> FakeRuntime:
    return FakeRuntime()


@pytest.fixture
def log_path(tmp_path: Path) -> Path:
    return tmp_path / "app" / "log.txt"


@pytest.fixture
def logger(log_path: Path, fake_runtime: FakeRuntime):
    instance = Logger(log_path, runtime=fake_runtime)
    yield instance
    instance.close()


@pytest.fixture
def isolated_hooks(monkeypatch: pytest.MonkeyPatch):
    """Let PythonRuntime install real hooks and restore them afterwards.

    atexit.register is intercepted; the yielded list holds what was handed
    to it. catch_warnings restores showwarning and the warning filters.
    """
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    monkeypatch.setattr(threading, "excepthook", threading.excepthook)
    registered: list = []
    monkeypatch.setattr(atexit, "register", registered.append)
    with warnings.catch_warnings():
        yield registered
