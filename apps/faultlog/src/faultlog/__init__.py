"""Process-wide capture of warnings, uncaught exceptions and fatal crashes."""

from .errors import (
    CapturedError,
    FaultlogError,
    LogDestinationError,
    RegistrationError,
    SettingsError,
    StructuredError,
)
from .handler import FaultLogHandler
from .logger import Logger
from .models import CallOperator, LogLine, RuntimeSignal, StackFrame
from .runtime import HostRuntime, PythonRuntime
from .settings import LoggerSettings, load_settings
from .severity import ErrorCode, Severity, classify

__all__ = [
    "CallOperator",
    "CapturedError",
    "ErrorCode",
    "FaultLogHandler",
    "FaultlogError",
    "HostRuntime",
    "LogDestinationError",
    "LogLine",
    "Logger",
    "LoggerSettings",
    "PythonRuntime",
    "RegistrationError",
    "RuntimeSignal",
    "Severity",
    "SettingsError",
    "StackFrame",
    "StructuredError",
    "classify",
    "load_settings",
]
