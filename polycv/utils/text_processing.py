"""
Text processing utilities for formatting and display.
"""

from typing import Any, Optional


def prepend_without_overlap(prefix: str, value: str) -> str:
    """
    Prepend a prefix unless the value already starts with it.

    Used for link schemes: stored contact values usually omit "https://",
    but some authors include it.

    Example:
        >>> prepend_without_overlap("https://", "github.com/jdoe")
        'https://github.com/jdoe'
        >>> prepend_without_overlap("https://", "https://github.com/jdoe")
        'https://github.com/jdoe'
    """
    if value.startswith(prefix):
        return value
    return f"{prefix}{value}"


def stringify_scalar(value: Any) -> Optional[str]:
    """
    Convert a YAML scalar to display text.

    None stays None so callers can tell "absent" apart from "empty". Floats
    that are whole numbers (e.g. a year typed as 2021.0) lose the ".0".
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def truncate_display(text: str, max_len: int) -> str:
    """
    Truncate text for display with ellipsis if needed.

    Args:
        text: Text to truncate
        max_len: Maximum length including ellipsis

    Returns:
        Original text if within max_len, otherwise truncated with "..."
    """
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
