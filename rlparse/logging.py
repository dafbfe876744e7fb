"""Diagnostics for rlparse.

stdout carries nothing but the JSON document, so every handler installed here
writes to stderr or to a log file.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

_ROOT = "rlparse"
_CONSOLE_FORMAT = "[rlparse] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class LogFileError(RuntimeError):
    """Raised when the requested log file cannot be opened."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"cannot open log file {path}: {reason}")
        self.path = path


def get_logger(stage: str | None = None) -> logging.Logger:
    """Return the logger for one pipeline stage, e.g. ``get_logger("splitter")``."""
    return logging.getLogger(f"{_ROOT}.{stage}" if stage else _ROOT)


def configure_logging(
    *,
    verbose: bool = False,
    log_file: Path | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Route rlparse diagnostics to stderr (or ``stream``) and optionally a file.

    Warnings about malformed declarations show by default; ``verbose`` adds the
    per-stage debug trail. Raises :class:`LogFileError` when ``log_file``
    cannot be opened, after the console handler is already in place.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_ROOT)
    logger.setLevel(level)
    logger.propagate = False
    _drop_handlers(logger)

    console = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console.setLevel(level)
    console.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file is not None:
        try:
            sink = logging.FileHandler(log_file, encoding="utf-8")
        except OSError as exc:
            raise LogFileError(log_file, exc.strerror or str(exc)) from exc
        sink.setLevel(level)
        sink.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(sink)

    return logger


def _drop_handlers(logger: logging.Logger) -> None:
    # Repeated main() calls in one process would otherwise duplicate output.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


__all__ = ["LogFileError", "configure_logging", "get_logger"]
