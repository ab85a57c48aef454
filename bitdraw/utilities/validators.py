"""
Input validation utilities.

This module provides the precondition checks used by decoders, sources and
generator constructors. Every failure raises ConfigurationError.
"""

from collections.abc import Sized

from .constants import MAX_DRAW_BITS, ConfigurationError


def validate_positive_number(value: int | float, name: str) -> None:
    """Validate that a number is positive."""
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {value}")


def validate_non_empty(values: Sized, name: str) -> None:
    """Validate that a collection is not empty."""
    if len(values) == 0:
        raise ConfigurationError(f"{name} cannot be empty")


def validate_range(min_value: int | float, max_value: int | float) -> None:
    """Validate that min_value is strictly less than max_value."""
    if not min_value < max_value:
        raise ConfigurationError(
            f"min_value must be less than max_value, got [{min_value}, {max_value}]"
        )


def validate_bit_count(n: int) -> None:
    """Validate the number of bits requested from a source."""
    if n < 0 or n > MAX_DRAW_BITS:
        raise ConfigurationError(f"bit count must be in [0, {MAX_DRAW_BITS}], got {n}")


def validate_span(min_value: int, max_value: int) -> None:
    """Validate that an integer range fits in one 64-bit draw."""
    span = max_value - min_value
    if span.bit_length() > MAX_DRAW_BITS:
        raise ConfigurationError(
            f"range [{min_value}, {max_value}] spans more than {MAX_DRAW_BITS} bits"
        )
