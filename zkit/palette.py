"""The colour palette shared by terminal interfaces: Catppuccin Mocha."""

from __future__ import annotations

import re

_HEX = re.compile(r"^#(?:[0-9a-fA-F]{6}|[0-9a-fA-F]{3})$")


class Color(str):
    """A colour written as a ``#rrggbb`` or ``#rgb`` hex string."""

    def __new__(cls, value: str) -> "Color":
        if not _HEX.match(value):
            raise ValueError(f"invalid hex colour: {value!r}")
        return super().__new__(cls, value)

    def rgb(self) -> tuple[int, int, int]:
        """Return the colour as a ``(red, green, blue)`` tuple of 0-255 values."""
        digits = self[1:]
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


# base colours
BASE = Color("#1e1e2e")  # primary background
MANTLE = Color("#181825")  # darker background
CRUST = Color("#11111b")  # darkest background
SURFACE0 = Color("#313244")  # elevated surface
SURFACE1 = Color("#45475a")  # borders, separators
SURFACE2 = Color("#585b70")  # inactive elements
OVERLAY0 = Color("#6c7086")  # muted text
OVERLAY1 = Color("#7f849c")  # secondary text
OVERLAY2 = Color("#9399b2")
SUBTEXT0 = Color("#a6adc8")
SUBTEXT1 = Color("#bac2de")
TEXT = Color("#cdd6f4")  # primary text

# accent colours
ROSEWATER = Color("#f5e0dc")
FLAMINGO = Color("#f2cdcd")
PINK = Color("#f5c2e7")
MAUVE = Color("#cba6f7")
RED = Color("#f38ba8")
MAROON = Color("#eba0ac")
PEACH = Color("#fab387")
YELLOW = Color("#f9e2af")
GREEN = Color("#a6e3a1")
TEAL = Color("#94e2d5")
SKY = Color("#89dceb")
SAPPHIRE = Color("#74c7ec")
BLUE = Color("#89b4fa")
LAVENDER = Color("#b4befe")

# semantic colours
SUCCESS = GREEN
ERROR = RED
WARNING = YELLOW
INFO = BLUE

# per-tool accents
ZBURN_ACCENT = PEACH
ZVAULT_ACCENT = MAUVE
ZSHIELD_ACCENT = TEAL

_CSS_ORDER = {
    "base": BASE,
    "mantle": MANTLE,
    "crust": CRUST,
    "surface0": SURFACE0,
    "surface1": SURFACE1,
    "surface2": SURFACE2,
    "overlay0": OVERLAY0,
    "overlay1": OVERLAY1,
    "overlay2": OVERLAY2,
    "subtext0": SUBTEXT0,
    "subtext1": SUBTEXT1,
    "text": TEXT,
    "rosewater": ROSEWATER,
    "flamingo": FLAMINGO,
    "pink": PINK,
    "mauve": MAUVE,
    "red": RED,
    "maroon": MAROON,
    "peach": PEACH,
    "yellow": YELLOW,
    "green": GREEN,
    "teal": TEAL,
    "sky": SKY,
    "sapphire": SAPPHIRE,
    "blue": BLUE,
    "lavender": LAVENDER,
}

CSS_VARIABLES = (
    ":root {\n"
    + "".join(f"  --ctp-{name}: {color};\n" for name, color in _CSS_ORDER.items())
    + "}\n"
)
"""The full palette as CSS custom properties."""