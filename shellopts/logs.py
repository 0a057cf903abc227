"""
shellopts debug tracing.

The library logs its registration, matching and parsing steps at DEBUG level
on the "shellopts" logger. Nothing is shown unless the host configures
logging or calls debug(), which routes the records to stderr through rich.
"""
import logging

from rich.console import Console
from rich.logging import RichHandler

logger = logging.getLogger("shellopts")
logger.addHandler(logging.NullHandler())

_handler = None


def debug(enabled=True, /):
    """
    Turn the rich-rendered debug trace on stderr on or off.

    Calling debug() twice does not attach a second handler.
    """
    global _handler

    if enabled and _handler is None:
        _handler = RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_path=False,
            markup=False
        )
        logger.addHandler(_handler)
        logger.setLevel(logging.DEBUG)
    elif not enabled and _handler is not None:
        logger.removeHandler(_handler)
        logger.setLevel(logging.NOTSET)
        _handler = None


__all__ = (
    "logger",
    "debug",
)
