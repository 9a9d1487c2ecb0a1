import logging
import os

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "dealer_pricing"


def configure_logging(verbose: bool = False) -> logging.Logger:
    """
    Attach a RichHandler to the package logger.  Safe to call repeatedly.

    DEBUG when ``verbose`` is set or ``DEBUG`` is in the environment,
    INFO otherwise.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    log_level = logging.DEBUG if verbose or os.getenv("DEBUG") else logging.INFO
    logger.setLevel(log_level)

    if not logger.handlers:
        handler = RichHandler(
            console=Console(stderr=True),
            show_time=True,
            show_level=True,
            show_path=False,
            rich_tracebacks=True,
            log_time_format="[%X]",
        )
        handler.setFormatter(logging.Formatter("[%(name)s]  %(message)s"))
        logger.addHandler(handler)
        logger.propagate = False

    for handler in logger.handlers:
        handler.setLevel(log_level)

    logger.debug("Logging configured at %s", logging.getLevelName(log_level))
    return logger
