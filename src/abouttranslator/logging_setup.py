"""Logging for CLI runs: Rich console output plus a per-run log file."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

DEFAULT_LOG_FILE = Path("translation_tool.log")

_FILE_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
_FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"

PACKAGE_LOGGER = "abouttranslator"


@contextmanager
def logging_session(
    log_file: Path | None = DEFAULT_LOG_FILE,
    level: int = logging.INFO,
    console: Console | None = None,
) -> Iterator[logging.Logger]:
    """Attach console and file handlers to the package logger for one run.

    The log file is truncated at the start of every run. Handlers are
    flushed, closed and detached on exit, including when the run raises.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    previous_level = logger.level
    logger.setLevel(logging.DEBUG)

    handlers: list[logging.Handler] = []

    console_handler = RichHandler(
        console=console,
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )
    console_handler.setLevel(level)
    handlers.append(console_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt=_FILE_DATEFMT))
        file_handler.setLevel(min(level, logging.INFO))
        handlers.append(file_handler)

    for handler in handlers:
        logger.addHandler(handler)

    try:
        if log_file is not None:
            logger.debug("Log file initialized: %s", Path(log_file).resolve())
        yield logger
    finally:
        for handler in handlers:
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(previous_level)
