"""Logging utilities.

All package loggers live under the ``podreformat`` namespace.  The library
itself never installs handlers on import; :func:`configure_logging` is called
by the command line interface and may be called any number of times.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

ROOT_LOGGER_NAME = "podreformat"

_FORMAT = "%(levelname)s %(name)s: %(message)s"


class _StderrHandler(logging.StreamHandler):
    """Stream handler bound to whatever ``sys.stderr`` is when a record is emitted.

    Modelled on :data:`logging.lastResort`: the stream is looked up on every
    use, so a replaced or closed ``sys.stderr`` is never written to.
    """

    def __init__(self, level: int = logging.NOTSET) -> None:
        logging.Handler.__init__(self, level)

    @property
    def stream(self) -> TextIO:  # type: ignore[override]
        return sys.stderr


def get_logger(name: str) -> logging.Logger:
    """Return a logger placed under the package namespace.

    ``name`` may be a module ``__name__`` (already inside the namespace) or a
    short suffix such as ``"cli"``.
    """

    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """Attach a single stderr handler to the package logger and set ``level``.

    Repeated calls only update the level.
    """

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logger.setLevel(level)
    if not any(isinstance(h, _StderrHandler) for h in logger.handlers):
        handler = _StderrHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
    return logger


__all__ = ["ROOT_LOGGER_NAME", "get_logger", "configure_logging"]
