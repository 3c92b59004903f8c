"""Logging utilities with rich console output.

Every module gets its logger through ``get_logger`` so that CLI output and
test capture behave the same way everywhere.

Usage:
    from common.logger import get_logger

    logger = get_logger(__name__)
    logger.info("Initializing repository...")
    logger.warning("Failed to create commit, skipping")
"""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .env import env

# Global console instance for consistent output
console = Console()

# Loggers handed out by get_logger, and the level set by setup_logging
_loggers: dict[str, logging.Logger] = {}
_default_level: str | None = None


def _rich_handler(show_time: bool = False, show_path: bool = False) -> RichHandler:
    handler = RichHandler(
        console=console,
        show_time=show_time,
        show_path=show_path,
        rich_tracebacks=True,
        markup=False,  # commit messages may contain [brackets]
    )
    handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    return handler


def get_logger(
    name: str,
    level: str | None = None,
    show_time: bool = False,
    show_path: bool = False,
) -> logging.Logger:
    """Get a configured logger with rich output.

    Args:
        name: Logger name (typically __name__ of the module)
        level: Logging level name. If None, uses the level given to
               setup_logging, else LOG_LEVEL, else INFO.
        show_time: Show timestamp in log output
        show_path: Show file path in log output

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Avoid adding multiple handlers if logger already configured
    if logger.handlers:
        return logger

    logger.setLevel((level or _default_level or env.log_level()).upper())
    logger.addHandler(_rich_handler(show_time=show_time, show_path=show_path))

    # pytest caplog captures through propagation
    logger.propagate = True

    _loggers[name] = logger
    return logger


def setup_logging(level: str | None = None, log_file: str | None = None) -> None:
    """Apply the CLI logging level to every module logger.

    Console output stays on the per-module rich handlers; the root logger only
    receives the optional file handler, so records are never printed twice.

    Args:
        level: Logging level; LOG_LEVEL or INFO when unset
        log_file: Optional file path to also log to a file
    """
    global _default_level

    _default_level = (level or env.log_level()).upper()
    for logger in _loggers.values():
        logger.setLevel(_default_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(_default_level)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.addHandler(file_handler)


def progress(message: str) -> None:
    """Print a progress line without the logger prefix.

    Example:
        >>> progress("  Progress: 100/250 commits created...")
          Progress: 100/250 commits created...
    """
    console.print(message, markup=False, highlight=False, soft_wrap=True)


def error(message: str) -> None:
    """Print an error message with a red X icon to stderr."""
    Console(stderr=True).print(f"[red]✗[/red] {escape(message)}", soft_wrap=True)
