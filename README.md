# zkit

A small toolkit of building blocks for Python applications, using only the
standard library:

- **Functional options**: `zkit.options.apply_options` applies option
  callables to a configuration object.
- **Thread-safe collections**: `ZMap` (`zkit.safemap`), `ZSet`
  (`zkit.safeset`) and the blocking FIFO `ZQueue` (`zkit.workqueue`).
- **Terminal styling**: a Catppuccin Mocha palette (`zkit.palette`), text
  styles (`zkit.style`), standard key bindings (`zkit.keys`), a logo
  (`zkit.logo`) and helpers for headers, menu items, footers and separators
  (`zkit.tui`).

## Installation

```
pip install zkit
```

## Functional options

An option is any callable that takes the target and modifies it in place.
`apply_options(target, *options)` calls each one in order and returns the
target, so a later option overrides an earlier one.

```python
from dataclasses import dataclass
from zkit.options import apply_options

@dataclass
class Config:
    name: str = "default"
    timeout: float = 30.0

def with_name(name):
    def option(cfg):
        cfg.name = name
    return option

cfg = apply_options(Config(), with_name("production"))
```

## Thread-safe collections

Every operation takes an internal lock, so instances can be shared between
threads.

```python
from zkit.safemap import ZMap
from zkit.safeset import ZSet, ordered

m = ZMap()
m.set("key", 42)
m.get("key", 0)        # 42
"key" in m             # True
m.delete("key")        # True (False if the key was absent)
m.keys()               # snapshot list, no particular order

s = ZSet()
s.add(3); s.add(1); s.add(3)
len(s)                 # 2
s.contains(1)          # True
s.remove(5)            # False
ordered(s)             # [1, 3], natural ascending order
s.ordered(lambda a, b: (a < b) - (a > b))  # [3, 1], three-way compare function
```

### ZQueue

```python
from zkit.workqueue import ZQueue, QueueClosedError, QueueEmptyError, CanceledError

with ZQueue() as q:    # leaving the block closes the queue
    q.push("job")
    q.pop()            # "job"; blocks while the queue is empty and open
```

- `push` raises `QueueClosedError` once the queue is closed.
- `pop` blocks until an item arrives; after `close()` it still returns the
  items left, then raises `QueueClosedError`. `close()` wakes every blocked
  consumer.
- `try_pop` never blocks and raises `QueueEmptyError` on an empty queue.
- `pop_context(cancel=None, timeout=None)` waits like `pop` but raises
  `CanceledError` when the `threading.Event` passed as `cancel` is set or the
  timeout (in seconds) runs out.
- `len(q)` and `q.is_closed()` report the current state.

## Terminal styling

`zkit.palette` defines the palette as `Color` values (hex strings with an
`rgb()` method), e.g. `BASE`, `TEXT`, `MAUVE`, `PEACH`, the semantic colours
`SUCCESS`, `ERROR`, `WARNING`, `INFO`, the accents `ZBURN_ACCENT`,
`ZVAULT_ACCENT`, `ZSHIELD_ACCENT`, and `CSS_VARIABLES`, the whole palette as
CSS custom properties under `:root`.

`zkit.style.Style` is an immutable style built with `bold()`, `foreground()`,
`border_style()` and `border_foreground()`; `render(text)` returns the text
wrapped in 24-bit ANSI escape sequences, boxed when a border is set
(`rounded_border()` gives rounded corners). Ready-made styles: `TITLE`,
`SUBTITLE`, `HIGHLIGHT`, `MUTED_TEXT`, `STATUS_OK`, `STATUS_ERR`,
`STATUS_WARN`, `BORDER`, `ACTIVE_BORDER`.

`zkit.keys` holds `KeyBinding` constants (`KEY_QUIT`, `KEY_HELP`, `KEY_UP`,
`KEY_DOWN`, `KEY_ENTER`, `KEY_BACK`, `KEY_TAB`, `KEY_FILTER`), each with its
key names, a `Help` label and `matches(key)`.

```python
from zkit import palette
from zkit.logo import styled_logo
from zkit.style import TITLE
from zkit.tui import (
    HelpPair, MenuItem, render_footer, render_header, render_menu_item, render_separator,
)

print(styled_logo(TITLE))
print(render_header("zvault", "Secrets", palette.ZVAULT_ACCENT))   # "  zvault / Secrets"
print(render_separator(40))                                          # 40 "─"; 60 if width <= 0
print(render_menu_item(MenuItem("Secrets", "(3)", True), palette.MAUVE))
print(render_footer([HelpPair("q", "quit"), HelpPair("?", "help")]))
```

## What it does not do

The styling helpers only produce strings. There is no event loop, no key
reading and no screen drawing: the key bindings describe keys but nothing
here listens for them. `Style.render` always emits ANSI colour codes; it does
not detect whether the output is a terminal or what colours it supports.