"""Timestamp formatting utilities."""

from datetime import datetime


def now() -> str:
    """
    Current local time as a compact, sortable string for directory names.

    Returns:
        Timestamp like "20251114_123456"
    """
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def format_elapsed(seconds: float) -> str:
    """
    Format an elapsed duration for log lines.

    Examples:
        format_elapsed(0.42)   # "0.42s"
        format_elapsed(75.0)   # "1m 15s"
    """
    if seconds < 60:
        return f"{seconds:.2f}s"
    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes}m {secs}s"
