"""Central logging setup for dirble"""
import logging

from rich.logging import RichHandler

from dirble.helpers import err_console


def setup_logging(log_level=logging.WARNING):
    """Route all records through a rich handler on stderr and return the package logger."""
    handler = RichHandler(console=err_console, show_path=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    logger = logging.getLogger("dirble")
    logger.setLevel(log_level)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.propagate = False
    return logger
