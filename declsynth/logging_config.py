"""Logging setup for declsynth.

Modules obtain loggers through :func:`get_logger`. Handlers are only installed
when an application calls :func:`configure_logging`.
"""

import logging

from rich.logging import RichHandler

LOGGER_NAME = "declsynth"

_configured = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the ``declsynth`` namespace.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        Logger instance.
    """
    if name != LOGGER_NAME and not name.startswith(f"{LOGGER_NAME}."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(level: int | str = logging.INFO) -> logging.Logger:
    """Attach a rich console handler to the package logger.

    Calling this more than once only updates the level.

    Args:
        level: Logging level name or number.

    Returns:
        The package logger.
    """
    global _configured

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if not _configured:
        handler = RichHandler(rich_tracebacks=True, show_path=False)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)
        logger.propagate = False
        _configured = True

    return logger


logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())
