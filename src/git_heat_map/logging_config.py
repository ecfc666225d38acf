"""
Logging configuration for git heat map.

Routes log records to the console, a log file, both, or nowhere, depending on
the configured log mode. Console output uses rich formatting when styling is
enabled and a plain timestamped layout otherwise.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .config import HeatMapConfig
from .exceptions import ConfigurationError

LOGGER_NAME = "git_heat_map"

PLAIN_FORMAT = "%(asctime)s  %(levelname)s  %(message)s"
PLAIN_DATEFMT = "%d %b %y %H:%M %Z"


def setup_logging(config: HeatMapConfig, verbose: bool = False) -> logging.Logger:
    """
    Configure the git_heat_map logger from a resolved configuration.

    Args:
        config: Resolved configuration (log mode, directory, file, styling)
        verbose: Enable DEBUG level logging

    Returns:
        Configured logger instance for git_heat_map

    Raises:
        ConfigurationError: If the log file cannot be created or opened
    """
    level = logging.DEBUG if verbose else logging.INFO

    handlers: list[logging.Handler] = []

    # Console logs go to stderr so the table on stdout stays pipeable
    if config.logs_to_console:
        if config.use_styling:
            handlers.append(
                RichHandler(
                    console=Console(stderr=True),
                    rich_tracebacks=True,
                    markup=False,
                    show_time=True,
                    show_path=verbose,
                )
            )
        else:
            stream_handler = logging.StreamHandler()
            stream_handler.setFormatter(logging.Formatter(PLAIN_FORMAT, datefmt=PLAIN_DATEFMT))
            handlers.append(stream_handler)

    if config.logs_to_file:
        try:
            config.log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(config.log_path, mode="a", encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(f"Cannot open log file {config.log_path}: {e}")
        file_handler.setFormatter(logging.Formatter(PLAIN_FORMAT, datefmt=PLAIN_DATEFMT))
        handlers.append(file_handler)

    if not handlers:
        handlers.append(logging.NullHandler())

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Module name (e.g., 'git_heat_map.core')
              If None, returns the root git_heat_map logger

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger(LOGGER_NAME)

    if not name.startswith(LOGGER_NAME):
        name = f"{LOGGER_NAME}.{name}"

    return logging.getLogger(name)
