"""Functional options: callables that configure a target object in place."""

from __future__ import annotations

from typing import Callable, TypeVar

T = TypeVar("T")

Option = Callable[[T], None]
"""A callable that modifies its target in place."""


def apply_options(target: T, *args: Option[T]) -> T:
    """Apply each option to ``target`` in the order given and return ``target``.

    Later options override earlier ones that touch the same field.
    """
    for option in args:
        option(target)
    return target