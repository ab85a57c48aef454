"""
Formatting utilities for generator descriptions.

Descriptions must depend only on configuration, so these helpers render
callables and constants without touching any drawn value.
"""

from collections.abc import Callable, Iterable
from typing import Any


def format_callable(fn: Callable[..., Any]) -> str:
    """Format a callable by its qualified name."""
    name = getattr(fn, "__qualname__", None) or getattr(fn, "__name__", None)
    if name is None:
        return repr(fn)
    return name


def format_value(value: Any) -> str:
    """Format a constant for display."""
    return repr(value)


def format_sequence(values: Iterable[Any]) -> str:
    """Format a sequence of constants as a list literal."""
    return repr(list(values))


def format_call(name: str, *args: Any, **kwargs: Any) -> str:
    """Format a constructor call, e.g. ``ints_range(-5, 5)``."""
    parts = [str(a) for a in args]
    parts.extend(f"{k}={v}" for k, v in kwargs.items())
    return f"{name}({', '.join(parts)})"
