"""
Test fixtures package for bitdraw.

Provides scripted sources and helpers shared by unit and property tests.
"""

from .sources import (
    PaddedReplaySource,
    draw_many,
    float_bits,
    is_float32,
    same_value,
)

__all__ = [
    "PaddedReplaySource",
    "draw_many",
    "float_bits",
    "is_float32",
    "same_value",
]
