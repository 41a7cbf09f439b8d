"""Standard key bindings for terminal interfaces."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Help:
    """The label and description shown for a binding in help text."""

    key: str
    desc: str


@dataclass(frozen=True)
class KeyBinding:
    """A set of key names that trigger one action, with its help text."""

    keys: tuple[str, ...]
    help: Help

    def matches(self, key: str) -> bool:
        """Return True if ``key`` triggers this binding."""
        return key in self.keys


KEY_QUIT = KeyBinding(("q", "ctrl+c"), Help("q", "quit"))
KEY_HELP = KeyBinding(("?",), Help("?", "help"))
KEY_UP = KeyBinding(("k", "up"), Help("↑/k", "up"))
KEY_DOWN = KeyBinding(("j", "down"), Help("↓/j", "down"))
KEY_ENTER = KeyBinding(("enter",), Help("enter", "confirm"))
KEY_BACK = KeyBinding(("esc",), Help("esc", "back"))
KEY_TAB = KeyBinding(("tab",), Help("tab", "next"))
KEY_FILTER = KeyBinding(("/",), Help("/", "filter"))