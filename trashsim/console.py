"""Clearing the terminal and moving its cursor with ANSI escape sequences."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

_CSI = "\x1b["

# Console attribute bits: blue, green, red in the low three bits, then intensity.
_BLUE, _GREEN, _RED, _INTENSITY = 0x1, 0x2, 0x4, 0x8


def _ansi_colour(nibble: int) -> tuple[int, bool]:
    code = 0
    if nibble & _RED:
        code |= 1
    if nibble & _GREEN:
        code |= 2
    if nibble & _BLUE:
        code |= 4
    return code, bool(nibble & _INTENSITY)


def _attribute_to_sgr(color: int) -> str:
    fg, fg_bright = _ansi_colour(color & 0x0F)
    bg, bg_bright = _ansi_colour((color >> 4) & 0x0F)
    fg_code = (90 if fg_bright else 30) + fg
    bg_code = (100 if bg_bright else 40) + bg
    return f"{_CSI}{fg_code};{bg_code}m"


def _cursor(x: int, y: int) -> str:
    return f"{_CSI}{y + 1};{x + 1}H"


def clear_screen(color: int = 0, stream: Optional[TextIO] = None) -> None:
    """Clear the screen, filling it with ``color``, and home the cursor.

    ``color`` is a console attribute byte: foreground in the low nibble,
    background in the high nibble. Zero clears with the terminal's defaults.
    """
    if not 0 <= color <= 0xFF:
        raise ValueError(f"colour attribute out of range: {color}")
    out = stream if stream is not None else sys.stdout
    if color:
        out.write(_attribute_to_sgr(color) + f"{_CSI}2J" + f"{_CSI}0m")
    else:
        out.write(f"{_CSI}2J")
    out.write(_cursor(0, 0))
    out.flush()


def goto_xy(x: int, y: int, stream: Optional[TextIO] = None) -> None:
    """Move the cursor to column ``x`` and row ``y``, both counted from zero."""
    if x < 0 or y < 0:
        raise ValueError(f"cursor position must not be negative: ({x}, {y})")
    out = stream if stream is not None else sys.stdout
    out.write(_cursor(x, y))
    out.flush()