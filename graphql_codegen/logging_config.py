"""Logging configuration for graphql_codegen.

Modules obtain their logger with ``get_logger(__name__)``; the CLI calls
``setup_logging`` once to route records through a rich console handler.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "graphql_codegen"
DEFAULT_FORMAT = "%(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the package root logger.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        Configured ``logging.Logger`` instance.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def setup_logging(level: str | int = "WARNING", console: Console | None = None) -> None:
    """Install a rich handler on the package root logger.

    Calling this more than once replaces the previously installed handler.

    Args:
        level: Log level name or number.
        console: Console to log to (defaults to stderr).
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level}")

    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)
