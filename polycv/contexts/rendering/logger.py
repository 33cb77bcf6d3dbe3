"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from polycv.utils.logger import setup_logger as _setup_logger
from polycv.utils.text_processing import truncate_display
from polycv.utils.timestamp import format_elapsed

CONTEXT_PREFIX = "[render]"
LOG_FILE_NAME = "render.log"


def setup_rendering_logger(log_dir: Path, browser: str = None, verbose: bool = False) -> Path:
    """
    Setup logger for rendering context.

    Writes {log_dir}/render.log, headed by the session details and the browser.

    Args:
        log_dir: Directory for this build session
        browser: Headless browser used for PDF printing (provenance only)
        verbose: Show DEBUG messages on the console too

    Returns:
        Path to log file
    """
    return _setup_logger(
        Path(log_dir) / LOG_FILE_NAME,
        console_level="DEBUG" if verbose else "INFO",
        session_info={"Browser": browser or "auto"},
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_build_start(config) -> None:
    """Log start of a build with its inputs."""
    _log_info(f"Building CV for languages: {', '.join(config.languages)}")
    _log_info(f"Output directory: {config.output_dir}")
    _log_debug(f"  Data: {config.data_file}")
    _log_debug(f"  Stylesheet: {config.stylesheet}")
    _log_debug(f"  Photo: {config.photo}")
    _log_debug(f"  PDF: {'enabled' if config.generate_pdf else 'disabled'}")


def log_language_result(lang: str, html_file: Path, pdf_file: Path = None) -> None:
    """Log the artifacts written for one language."""
    _log_success(f"OK : {html_file}")
    if pdf_file is not None:
        _log_success(f"OK : {pdf_file}")
    else:
        _log_debug(f"  No PDF printed for '{lang}'")


def log_print_result(result, elapsed_time: float) -> None:
    """
    Log a PDF print result with diagnostics.

    Args:
        result: PrintResult from print_pdf()
        elapsed_time: Time taken to print
    """
    if result.success:
        _log_debug(f"Printed {result.pdf_path} ({format_elapsed(elapsed_time)})")
        return

    _log_error(f"PDF printing failed ({format_elapsed(elapsed_time)})")
    for i, err in enumerate(result.errors[:5], 1):
        _log_error(f"  Error {i}: {err}")

    # Use opt(raw=True) to keep multi-line browser output readable
    if result.stderr:
        logger.opt(raw=True).debug(
            f"\n{'=' * 80}\nBROWSER STDERR:\n{'=' * 80}\n{truncate_display(result.stderr, 4000)}\n"
        )
