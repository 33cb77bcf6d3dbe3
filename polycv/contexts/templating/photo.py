"""
Photo embedding.

Inlines a local image as a base64 data URI so the HTML stays self-contained
and the headless browser never has to resolve a relative path.
"""

import base64
from pathlib import Path
from typing import Optional, Union

from polycv.contexts.templating.logger import _log_debug

DEFAULT_MIME = "image/jpeg"

MIME_BY_EXTENSION = {
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
}


def guess_mime(path: Path) -> str:
    """MIME type from the file extension, defaulting to image/jpeg."""
    extension = Path(path).suffix.lower().lstrip(".")
    return MIME_BY_EXTENSION.get(extension, DEFAULT_MIME)


def encode_photo(path: Optional[Union[str, Path]]) -> Optional[str]:
    """
    Encode a local image file to a base64 data URI.

    Args:
        path: Image path, or None when no photo is configured

    Returns:
        "data:{mime};base64,{payload}", or None if there is no such file
    """
    if path is None or str(path) == "":
        return None

    path = Path(path)
    if not path.is_file():
        _log_debug(f"No photo embedded, file not found: {path}")
        return None

    payload = base64.b64encode(path.read_bytes()).decode("ascii")
    mime = guess_mime(path)
    _log_debug(f"Embedded photo {path.name} ({mime}, {len(payload)} base64 chars)")
    return f"data:{mime};base64,{payload}"
