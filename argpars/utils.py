# Argpars Command Line Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os
import shutil
import sys

import pythonjsonlogger.json
from rich.logging import RichHandler


def get_program_invocation(script: str | None = None) -> str:
    """Returns the recommended program invocation prefix."""
    script = script if script is not None else sys.argv[0]
    program = shutil.which(script)
    if program:
        return os.path.basename(program)

    executable = sys.executable
    if "python" in executable and script.endswith(".py"):
        return f"python {script}"
    return script


def _json_formatter() -> logging.Formatter:
    return pythonjsonlogger.json.JsonFormatter(
        "%(asctime)s %(name)s %(levelname)s %(message)s"
    )


def setup_logging(
    mode: str | None = None,
    level: int = logging.WARNING,
    log_filename: str | None = None,
) -> None:
    """
    Send "argpars" log records to the console, and optionally to a file.

    The library never configures handlers itself; call this once from the
    application entry point.

    Args:
        mode (str | None): "cli" for Rich console logs or "json" for one JSON
            object per line on stderr. Defaults to `ARGPARS_LOG_MODE`, then "cli".
        level (int): Console logging level.
        log_filename (str | None): Also log everything at DEBUG to this file,
            formatted like the console (JSON in "json" mode).

    Raises:
        ValueError: If an invalid logging `mode` is passed.
    """
    mode = mode or os.getenv("ARGPARS_LOG_MODE") or "cli"
    if mode == "cli":
        console_handler: logging.Handler = RichHandler(
            show_path=False, markup=False, log_time_format="[%Y-%m-%d %H:%M:%S]"
        )
        file_formatter = logging.Formatter(
            "%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    elif mode == "json":
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(_json_formatter())
        file_formatter = _json_formatter()
    else:
        raise ValueError(f"Invalid log mode: {mode}")

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.handlers.clear()

    console_handler.setLevel(level)
    root.addHandler(console_handler)

    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(file_formatter)
        root.addHandler(file_handler)

    logging.getLogger("argpars").debug("Logging initialized in '%s' mode.", mode)
