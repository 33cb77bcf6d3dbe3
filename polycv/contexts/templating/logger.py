"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules should import from this module, not from loguru directly.
Sinks are configured by the rendering context when a build starts.
"""

from pathlib import Path

from loguru import logger

CONTEXT_PREFIX = "[template]"


# Wrapper functions with automatic [template] prefix


def _log_info(message: str) -> None:
    """Log info message with [template] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [template] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level templating-specific logging helpers


def log_resume_loaded(path: Path, resume) -> None:
    """Log a summary of a freshly loaded resume."""
    _log_info(f"Loaded resume data: {path}")
    _log_debug(
        f"  skills={len(resume.skills)} experience={len(resume.experience)} "
        f"education={len(resume.education)} projects={len(resume.projects)} "
        f"certifications={len(resume.certifications)}"
    )


def log_document_built(lang: str, html: str, include_certifications: bool) -> None:
    """Log the size of an assembled document."""
    _log_debug(f"Assembled '{lang}' document ({len(html)} chars)")
    if not include_certifications:
        _log_debug("  Certifications section built but not included")
