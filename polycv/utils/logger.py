"""
Build session logging.

A build session sends everything (DEBUG and up) to one log file and shows
INFO and up on the console. The log file opens with a session header (polycv
version, command line, working directory, Python version) so a log found
later can be traced back to the run that wrote it.
"""

import platform
import sys
from pathlib import Path
from typing import Any, Mapping, Optional

from loguru import logger

from polycv import __version__

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <level>{message}</level>"
)
HEADER_RULE = "=" * 80


def setup_logger(
    log_file: Path,
    console_level: str = "INFO",
    session_info: Optional[Mapping[str, Any]] = None,
) -> Path:
    """
    Route loguru output for one build session.

    Replaces any existing sinks (including loguru's default stderr sink).

    Args:
        log_file: File receiving every message; parent directories are created
        console_level: Minimum level shown on stdout
        session_info: Extra key/value pairs for the session header

    Returns:
        Path to log file
    """
    log_file = Path(log_file)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logger.remove()
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG", encoding="utf-8")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    log_session_header(session_info)
    return log_file


def log_session_header(session_info: Optional[Mapping[str, Any]] = None) -> None:
    """Write the session header at DEBUG level, so it lands in the file only by default."""
    entries = {
        "polycv": __version__,
        "Command": " ".join(sys.argv),
        "Working directory": Path.cwd(),
        "Python": platform.python_version(),
    }
    entries.update(session_info or {})

    logger.debug(HEADER_RULE)
    for key, value in entries.items():
        logger.debug(f"{key}: {value}")
    logger.debug(HEADER_RULE)
