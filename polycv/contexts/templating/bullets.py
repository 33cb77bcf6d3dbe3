"""
Bullet list conversion.

Turns the constrained bullet syntax used in resume descriptions into a flat
HTML list:

    - Top-level bullet
      wrapped continuation line
      - Sub bullet (exactly two spaces before the marker)

Sub bullets are siblings carrying the "sub-item" class; indentation is left to CSS.
"""

import re
from dataclasses import dataclass
from typing import List, Optional

from polycv.contexts.templating.logger import _log_debug

BULLET_PATTERN = re.compile(r"^\s*[-*]\s")
SUB_BULLET_PATTERN = re.compile(r"^\s{2}[-*]\s")
MARKER_PATTERN = re.compile(r"^\s*[-*]\s?")

SUB_ITEM_CLASS = "sub-item"


@dataclass
class Bullet:
    """One list item; `is_sub` marks an indented sub bullet."""

    text: str
    is_sub: bool = False

    def to_html(self) -> str:
        if self.is_sub:
            return f'<li class="{SUB_ITEM_CLASS}">{self.text}</li>'
        return f"<li>{self.text}</li>"


def parse_bullets(text: Optional[str]) -> List[Bullet]:
    """
    Group description lines into bullets.

    Lines are classified on their raw form (indentation matters for sub
    bullets); content is trimmed. A continuation line is appended to the
    previous bullet. A continuation with no previous bullet opens an implicit
    top-level bullet so that no text is lost.
    """
    if not text:
        return []

    bullets: List[Bullet] = []
    for raw_line in text.strip().split("\n"):
        line = raw_line.rstrip()
        if not line.strip():
            continue

        if BULLET_PATTERN.match(line):
            is_sub = SUB_BULLET_PATTERN.match(line) is not None
            content = MARKER_PATTERN.sub("", line, count=1).strip()
            bullets.append(Bullet(content, is_sub))
        elif bullets:
            previous = bullets[-1]
            previous.text = f"{previous.text} {line.strip()}".strip()
        else:
            _log_debug(f"Continuation line before first bullet, starting a bullet: {line.strip()!r}")
            bullets.append(Bullet(line.strip(), False))

    return bullets


def to_list_markup(text: Optional[str]) -> str:
    """
    Convert bullet text to a flat HTML <ul>.

    Never raises; empty input gives an empty list.

    Examples:
        >>> to_list_markup("- a\\n- b")
        '<ul><li>a</li><li>b</li></ul>'
        >>> to_list_markup("- a\\n  continued\\n- b")
        '<ul><li>a continued</li><li>b</li></ul>'
        >>> to_list_markup("- a\\n  - sub")
        '<ul><li>a</li><li class="sub-item">sub</li></ul>'
    """
    items = "".join(bullet.to_html() for bullet in parse_bullets(text))
    return f"<ul>{items}</ul>"


# Short alias
to_li = to_list_markup
