import logging
from typing import Optional

from rich.logging import RichHandler

LOG_FORMAT = "%(name)s: %(message)s"


def configure_logging(level: int = logging.INFO, handler: Optional[logging.Handler] = None) -> None:
    """
    Configure the root logger to render through rich.

    Called by the CLI only; importing the library never touches logging setup.
    """
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="[%X]",
        handlers=[handler or RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """
    Return a named logger (after logging is configured).
    """
    return logging.getLogger(name)
