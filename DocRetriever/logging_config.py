"""Console logging for interactive diagnostics."""

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "DocRetriever"


def set_log_level(level) -> logging.Logger:
    """Set the package logger level from a level name or number."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)
    logger.setLevel(level)
    return logger


def configure_logging(level="WARNING", console: Console = None) -> logging.Logger:
    """
    Attach a rich console handler to the package logger once.

    Args:
        level: Logging level name or number
        console: Optional rich console to write to (defaults to stderr)

    Returns:
        The configured package logger
    """
    logger = set_log_level(level)

    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        handler = RichHandler(console=console or Console(stderr=True), show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    return logger
