"""
Logging configuration for the MCP server.

stdout carries the protocol stream, so console output goes to stderr.
``setup_logging`` only configures a logger once.
"""

import logging
import sys
from pathlib import Path
from typing import Optional


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Configure the root logger (or the logger named ``logger_name``).

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``). Case insensitive;
        unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file to log messages to. If omitted, no file handler is
        added.
    logger_name : Optional[str]
        Logger to configure instead of the root logger.
    """
    logger = logging.getLogger(logger_name)
    if logger.handlers:
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    logger.setLevel(numeric_level)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
