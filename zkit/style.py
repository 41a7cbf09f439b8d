"""Minimal terminal text styles: bold, foreground colour and borders."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass, replace
from typing import Optional

from zkit.palette import (
    ERROR,
    LAVENDER,
    OVERLAY1,
    PEACH,
    SUBTEXT1,
    SUCCESS,
    SURFACE1,
    WARNING,
    Color,
)

_RESET = "\x1b[0m"


@dataclass(frozen=True)
class Border:
    """The characters that draw a box around rendered text."""

    top: str
    bottom: str
    left: str
    right: str
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str


def rounded_border() -> Border:
    """Return a border with rounded corners."""
    return Border("─", "─", "│", "│", "╭", "╮", "╰", "╯")


def _display_width(text: str) -> int:
    width = 0
    for ch in text:
        if unicodedata.combining(ch):
            continue
        width += 2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1
    return width


def _fg_code(color: Color) -> str:
    r, g, b = color.rgb()
    return f"38;2;{r};{g};{b}"


def _paint(text: str, codes: str) -> str:
    if not codes or not text:
        return text
    return f"\x1b[{codes}m{text}{_RESET}"


@dataclass(frozen=True)
class Style:
    """An immutable text style; every setter returns a new style."""

    is_bold: bool = False
    fg: Optional[Color] = None
    border: Optional[Border] = None
    border_fg: Optional[Color] = None

    def bold(self, value: bool = True) -> "Style":
        """Return a copy with bold turned on or off."""
        return replace(self, is_bold=value)

    def foreground(self, color: Color) -> "Style":
        """Return a copy with the given text colour."""
        return replace(self, fg=color)

    def border_style(self, border: Border) -> "Style":
        """Return a copy that draws ``border`` around the text."""
        return replace(self, border=border)

    def border_foreground(self, color: Color) -> "Style":
        """Return a copy whose border is drawn in ``color``."""
        return replace(self, border_fg=color)

    def _text_codes(self) -> str:
        codes = []
        if self.is_bold:
            codes.append("1")
        if self.fg is not None:
            codes.append(_fg_code(self.fg))
        return ";".join(codes)

    def render(self, text: str) -> str:
        """Return ``text`` with this style applied as ANSI escape sequences."""
        lines = text.split("\n")
        codes = self._text_codes()
        if self.border is None:
            return "\n".join(_paint(line, codes) for line in lines)

        b = self.border
        border_codes = _fg_code(self.border_fg) if self.border_fg is not None else ""
        width = max(_display_width(line) for line in lines)

        rows = [_paint(b.top_left + b.top * width + b.top_right, border_codes)]
        left = _paint(b.left, border_codes)
        right = _paint(b.right, border_codes)
        for line in lines:
            padding = " " * (width - _display_width(line))
            rows.append(left + _paint(line, codes) + padding + right)
        rows.append(_paint(b.bottom_left + b.bottom * width + b.bottom_right, border_codes))
        return "\n".join(rows)


# text styles
TITLE = Style().bold(True).foreground(LAVENDER)
SUBTITLE = Style().bold(True).foreground(SUBTEXT1)
HIGHLIGHT = Style().foreground(PEACH)
MUTED_TEXT = Style().foreground(OVERLAY1)

# status indicators
STATUS_OK = Style().foreground(SUCCESS)
STATUS_ERR = Style().foreground(ERROR)
STATUS_WARN = Style().foreground(WARNING)

# structural styles
BORDER = Style().border_style(rounded_border()).border_foreground(SURFACE1)
ACTIVE_BORDER = Style().border_style(rounded_border()).border_foreground(LAVENDER)