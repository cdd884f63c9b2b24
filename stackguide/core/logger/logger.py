"""Logging system with Rich support."""

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from stackguide.core.config.settings import LoggingSettings, get_settings

# Global console instance, shared by log output and CLI diagnostics
_console: Console | None = None
_loggers: dict[str, logging.Logger] = {}

ROOT_LOGGER_NAME = "stackguide"


def setup_logging(settings: LoggingSettings | None = None, verbose: bool = False) -> None:
    """Configure the ``stackguide`` logger hierarchy.

    Args:
        settings: Logging settings. Uses global settings if not provided.
        verbose: Force DEBUG level regardless of the configured level.
    """
    global _console

    if settings is None:
        settings = get_settings().logging

    level = logging.DEBUG if verbose else getattr(logging, settings.level)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.propagate = False
    root_logger.handlers.clear()

    handler: RichHandler | logging.StreamHandler
    if settings.use_rich:
        _console = Console(stderr=True)
        handler = RichHandler(
            console=_console,
            show_path=False,
            show_time=True,
            rich_tracebacks=True,
            markup=False,
        )
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(settings.format))

    root_logger.addHandler(handler)

    if settings.file:
        settings.file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(settings.file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        root_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """Get or create a logger below the ``stackguide`` namespace.

    Args:
        name: Logger name (a class name or ``__name__``).

    Returns:
        Configured logger instance.
    """
    if name not in _loggers:
        qualified = name if name.startswith(ROOT_LOGGER_NAME) else f"{ROOT_LOGGER_NAME}.{name}"
        _loggers[name] = logging.getLogger(qualified)

        if not logging.getLogger(ROOT_LOGGER_NAME).handlers:
            setup_logging()

    return _loggers[name]


def get_console() -> Console:
    """Get the global Rich console instance (stderr).

    Returns:
        Console instance.
    """
    global _console
    if _console is None:
        _console = Console(stderr=True)
    return _console
