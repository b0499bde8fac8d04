"""
ANSI styling for benchmark output.

Respects NO_COLOR to disable. Enables only when stdout is a TTY unless
FORCE_COLOR is set. The check runs on every call so redirected output
stays plain.
"""

from __future__ import annotations

import os
import sys

_CODES = {
    "bold": "\x1b[1m",
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "cyan": "\x1b[36m",
}
_RESET = "\x1b[0m"

# role -> (fg, bold)
ROLES = {
    "heading": ("cyan", True),
    "scenario": (None, True),
    "faster": ("green", False),
    "slower": ("red", False),
    "warning": ("yellow", False),
}


def _fg_from_hex(value: str) -> str:
    value = value.strip().lstrip("#")
    if len(value) != 6:
        return ""
    try:
        r, g, b = (int(value[i : i + 2], 16) for i in (0, 2, 4))
    except ValueError:
        return ""
    return f"\x1b[38;2;{r};{g};{b}m"


def _fg_code(fg: str) -> str:
    if fg.startswith("#"):
        return _fg_from_hex(fg)
    return _CODES.get(fg.lower(), "")


def color_enabled() -> bool:
    if os.getenv("NO_COLOR") is not None:
        return False
    if os.getenv("FORCE_COLOR") is not None:
        return True
    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


def color(text: str, *, fg: str | None = None, bold: bool = False) -> str:
    if (fg is None and not bold) or not color_enabled():
        return text
    prefix = (_CODES["bold"] if bold else "") + (_fg_code(fg) if fg else "")
    if not prefix:
        return text
    return prefix + text + _RESET


def style(text: str, role: str) -> str:
    """Apply the named output role from ``ROLES``; unknown roles stay plain."""
    fg, bold = ROLES.get(role, (None, False))
    return color(text, fg=fg, bold=bold)


__all__ = ["ROLES", "color", "color_enabled", "style"]
