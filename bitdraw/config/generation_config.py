"""
Retry-budget configuration for generators.
"""

from dataclasses import dataclass, replace
from typing import Any

from ..utilities.constants import FILTER_TRIES, FLOAT_GEN_TRIES, SIGNIFICAND_TRIES
from ..utilities.validators import validate_positive_number


@dataclass(frozen=True)
class GenerationConfig:
    """
    Immutable retry budgets captured by generators at construction time.

    ``float_gen_tries`` bounds the outer range check of float generators,
    ``significand_tries`` the inner significand loop, and ``filter_tries``
    the attempts of ``Generator.filter``.
    """

    filter_tries: int = FILTER_TRIES
    float_gen_tries: int = FLOAT_GEN_TRIES
    significand_tries: int = SIGNIFICAND_TRIES

    def __post_init__(self):
        """Validate budgets after initialization."""
        validate_positive_number(self.filter_tries, "filter_tries")
        validate_positive_number(self.float_gen_tries, "float_gen_tries")
        validate_positive_number(self.significand_tries, "significand_tries")

    def with_overrides(self, **overrides: Any) -> "GenerationConfig":
        """Return a copy with the given fields replaced."""
        return replace(self, **overrides)

    def to_dict(self) -> dict[str, int]:
        """Convert configuration to dictionary representation."""
        return {
            "filter_tries": self.filter_tries,
            "float_gen_tries": self.float_gen_tries,
            "significand_tries": self.significand_tries,
        }


DEFAULT_CONFIG = GenerationConfig()
