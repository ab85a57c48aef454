"""
Configuration management for bitdraw.

Retry budgets live in one immutable configuration object that generators
capture when they are constructed.
"""

from .environment import get_generation_config
from .generation_config import DEFAULT_CONFIG, GenerationConfig

__all__ = ["DEFAULT_CONFIG", "GenerationConfig", "get_generation_config"]
