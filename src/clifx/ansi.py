"""ANSI escape sequence stripper."""

from __future__ import annotations

import re

# Combined pattern for all ANSI escape sequences:
# - CSI sequences: ESC [ ... final_byte (colors, cursor, etc.)
# - OSC sequences: ESC ] ... BEL (terminal title, etc.)
# - Simple escapes: ESC followed by single char
ANSI_ESCAPE = re.compile(r"\x1B(?:\[[0-?]*[ -/]*[@-~]|\][^\x07]*\x07|[@-Z\\^_-])")


def strip_ansi(text: str) -> str:
    """Remove all ANSI escape sequences from text.

    Args:
        text: Input text potentially containing ANSI codes.

    Returns:
        Clean text with all escape sequences removed.
    """
    if not text:
        return ""
    return ANSI_ESCAPE.sub("", text)


def visible_width(text: str) -> int:
    """Number of characters left once escape sequences are removed."""
    return len(strip_ansi(text))
