"""
Domain value objects for the generation core.
"""

from .float_format import FLOAT32, FLOAT64, FloatFormat
from .group import Group, Trace

__all__ = ["FLOAT32", "FLOAT64", "FloatFormat", "Group", "Trace"]
