"""Helpers that render common pieces of a terminal interface."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from zkit.palette import LAVENDER, OVERLAY1, SUBTEXT1, SURFACE1, SURFACE2, TEXT, Color
from zkit.style import Style


@dataclass(frozen=True)
class HelpPair:
    """A key label and its description for footer help text."""

    key: str
    desc: str


@dataclass(frozen=True)
class MenuItem:
    """One entry in a menu list."""

    label: str
    count: str = ""  # e.g. "(3)", "(2 pending)"
    active: bool = False


def render_footer(pairs: Iterable[HelpPair]) -> str:
    """Render pairs as one help line: ``"  key desc | key desc"``."""
    pairs = list(pairs or ())
    if not pairs:
        return ""

    key_style = Style().foreground(LAVENDER).bold(True)
    desc_style = Style().foreground(OVERLAY1)
    sep = Style().foreground(SURFACE2).render(" | ")

    parts = (f"{key_style.render(p.key)} {desc_style.render(p.desc)}" for p in pairs)
    return "  " + sep.join(parts)


def render_menu_item(item: MenuItem, accent: Color) -> str:
    """Render a menu item; the active one gets a ``▸`` cursor in ``accent``."""
    accent_style = Style().foreground(accent).bold(True)
    text_style = Style().foreground(TEXT)
    count_style = Style().foreground(OVERLAY1)

    if item.active:
        out = f"  {accent_style.render('▸')} {accent_style.render(item.label)}"
    else:
        out = "    " + text_style.render(item.label)

    if item.count:
        out += " " + count_style.render(item.count)
    return out


def render_header(app_name: str, view_title: str, accent: Color) -> str:
    """Render a breadcrumb header ``"  app / view"``; the view part is optional."""
    name_style = Style().foreground(accent).bold(True)
    out = "  " + name_style.render(app_name)
    if view_title:
        out += Style().foreground(OVERLAY1).render(" / ")
        out += Style().foreground(SUBTEXT1).render(view_title)
    return out


def render_separator(width: int) -> str:
    """Render a horizontal rule ``width`` cells wide; 60 if ``width`` <= 0."""
    if width <= 0:
        width = 60
    return Style().foreground(SURFACE1).render("─" * width)