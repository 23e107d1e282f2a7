"""
Logging setup.

All modules log through the standard library; records are rendered by rich so
they interleave cleanly with progress bars on the same console.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

console = Console(stderr=True)


def configure_logging(level: str = "INFO") -> None:
    """
    Route root logging through a RichHandler.

    Safe to call more than once; the previous handler is replaced.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR)
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)

    handler = RichHandler(console=console, show_path=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    root.addHandler(handler)
    root.setLevel(level.upper())

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
