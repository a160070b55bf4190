"""What the attached terminal can show: 24-bit color support and viewport size."""

from __future__ import annotations

import os
from typing import NamedTuple

from rich.console import Console

from clifx.limits import FALLBACK_TERMINAL_HEIGHT, FALLBACK_TERMINAL_WIDTH

# TERM_PROGRAM values, lowercased. Terminal.app renders 24-bit escapes as 256 colors even
# when COLORTERM claims otherwise.
_PALETTE_ONLY_PROGRAMS = frozenset({"apple_terminal"})
_TRUECOLOR_PROGRAMS = frozenset({"iterm.app", "vscode", "kitty", "wezterm", "ghostty", "alacritty"})

_PROGRAM_NAMES = {
    "Apple_Terminal": "Terminal.app",
    "iTerm.app": "iTerm2",
    "vscode": "VS Code",
}


class TerminalSize(NamedTuple):
    columns: int
    rows: int


def supports_truecolor() -> bool:
    """Guess whether ``38;2;r;g;b`` escapes render as intended.

    TERM_PROGRAM is trusted over COLORTERM; Windows Terminal is recognized by WT_SESSION.
    """
    program = os.environ.get("TERM_PROGRAM", "").lower()
    if program in _PALETTE_ONLY_PROGRAMS:
        return False
    if program in _TRUECOLOR_PROGRAMS:
        return True
    if os.environ.get("COLORTERM", "").lower() in ("truecolor", "24bit"):
        return True
    return bool(os.environ.get("WT_SESSION"))


def get_terminal_name() -> str:
    """Name used in the truecolor warning."""
    program = os.environ.get("TERM_PROGRAM", "")
    if program:
        return _PROGRAM_NAMES.get(program, program)
    if os.environ.get("WT_SESSION"):
        return "Windows Terminal"
    return os.environ.get("TERM") or "Unknown terminal"


def get_terminal_size(console: Console | None = None) -> TerminalSize:
    """Return the viewport size, falling back to 80x24 when it cannot be measured."""
    console = console or Console()
    try:
        width, height = console.size
    except OSError:
        return TerminalSize(FALLBACK_TERMINAL_WIDTH, FALLBACK_TERMINAL_HEIGHT)
    if width <= 0 or height <= 0:
        return TerminalSize(FALLBACK_TERMINAL_WIDTH, FALLBACK_TERMINAL_HEIGHT)
    return TerminalSize(width, height)
