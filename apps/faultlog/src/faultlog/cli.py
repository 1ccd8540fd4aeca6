"""CLI entry: run a Python script with faultlog's hooks installed."""

from __future__ import annotations

import argparse
import runpy
import sys
from pathlib import Path

from .constants import ERROR_PREFIX
from .errors import FaultlogError
from .logger import Logger
from .settings import LoggerSettings, load_settings


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    script_path = Path(args.script).expanduser().resolve()
    if not script_path.is_file():
        print(render_error(f"Script not found: {script_path}"))
        return 1

    try:
        settings = (
            load_settings(args.settings) if args.settings else LoggerSettings()
        )
        logger = Logger(args.log, settings=settings)
        logger.register_error_handlers()
    except FaultlogError as exc:
        print(render_error(str(exc)))
        return 1

    return run_script(script_path, args.script_args)


def run_script(script_path: Path, script_args: list[str]) -> int:
    """Run `script_path` as __main__.

    An exception escaping the script is handed to sys.excepthook, the same way
    the interpreter would, so it is recorded for the fatal log as well.
    """
    saved_argv = sys.argv[:]
    sys.argv = [str(script_path), *script_args]
    try:
        runpy.run_path(str(script_path), run_name="__main__")
    except SystemExit as exc:
        return _exit_code(exc.code)
    except Exception as exc:
        sys.excepthook(type(exc), exc, exc.__traceback__)
        return 1
    finally:
        sys.argv = saved_argv
    return 0


def render_error(message: str) -> str:
    return f"{ERROR_PREFIX} {message}"


def _exit_code(code: object) -> int:
    if code is None:
        return 0
    if isinstance(code, int):
        return code
    print(code, file=sys.stderr)
    return 1


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="faultlog",
        description="Run a Python script and log its warnings, uncaught exceptions and fatal errors.",
    )
    parser.add_argument(
        "--log",
        required=True,
        help="Main log file path; the uncaught exception and fatal logs go next to it.",
    )
    parser.add_argument(
        "--settings",
        required=False,
        help="Optional JSON settings file.",
    )
    parser.add_argument("script", help="Path to the Python script to run.")
    parser.add_argument(
        "script_args",
        nargs=argparse.REMAINDER,
        help="Arguments passed through to the script.",
    )
    return parser
