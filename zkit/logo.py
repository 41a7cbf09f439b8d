"""The ASCII wordmark shown on splash screens."""

from __future__ import annotations

from zkit.style import Style

LOGO = (
    "_  _  _| _ _  _ _ \n"
    "/_(_|| |(_(_)| |_)\n"
    "               |  "
)


def styled_logo(style: Style) -> str:
    """Return the logo rendered with ``style``."""
    return style.render(LOGO)