"""Logging configuration for the TicTacToe engine."""

import logging
import sys


def setup_logging(level: str = "INFO", format_style: str = "simple") -> None:
    """
    Set up logging for a process that drives the engine.

    The library never calls this itself; engine modules only create
    loggers, and the host application decides where records go.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_style: "simple" or "detailed"
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    formats = {
        "simple": "%(name)s - %(levelname)s - %(message)s",
        "detailed": "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
    }
    log_format = formats.get(format_style, formats["simple"])

    logging.basicConfig(
        level=numeric_level,
        format=log_format,
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for an engine module.

    Names keep the package prefix so a host application can tune
    every engine logger through logging.getLogger("tictactoe").

    Args:
        name: Module name, usually __name__.

    Returns:
        Logger instance, e.g. "tictactoe.engine".
    """
    return logging.getLogger(name)
