from __future__ import annotations

from rich.console import Console
from rich.logging import RichHandler
import logging

_console = Console(highlight=False)
_err_console = Console(stderr=True)

def get_logger(name: str = "ruptime") -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        # stdout carries the single uptime line, logs go to stderr
        handler = RichHandler(console=_err_console, show_time=False, show_level=True, show_path=False)
        formatter = logging.Formatter("%(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        logger.propagate = False
    return logger

def console() -> Console:
    return _console
