"""
Logging setup for the command-line entry points.

Library modules only create loggers (logging.getLogger(__name__)); the CLIs
call `configure_logging` once to route the `sortwatch` logger through rich.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

__all__ = ["configure_logging"]

_HANDLER_NAME = "sortwatch-rich"


def configure_logging(level: Union[int, str] = "WARNING", console: Optional[Console] = None) -> logging.Logger:
    """Attach a RichHandler to the `sortwatch` logger (idempotent) and set its level."""
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level!r}")
        level = resolved

    logger = logging.getLogger("sortwatch")
    logger.setLevel(level)
    if not any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        handler = RichHandler(console=console, show_path=False, rich_tracebacks=True)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        logger.addHandler(handler)
        logger.propagate = False
    return logger
