"""
Constants and error types shared across the generation core.

Group labels, retry budgets and the two error families live here so that
decoders, generators and sources agree on them.
"""

from enum import Enum

# Group labels
FLOAT_EXP_LABEL = "floatexp"
FLOAT_SIGNIF_LABEL = "floatsignif"
TRY_LABEL = "try"
UINT_LABEL = "uint"
UINT_BIASED_LABEL = "uintbiased"
ONE_OF_LABEL = "oneof"
PTR_LABEL = "ptr"

# Retry budgets
FLOAT_GEN_TRIES = 100
FILTER_TRIES = 100
SIGNIFICAND_TRIES = 1000
UINT_REJECT_TRIES = 64

# Source limits
MAX_DRAW_BITS = 64

FAILED_TO_GEN_FLOAT = "failed to generate suitable floating-point number"
FAILED_TO_GEN_SIGNIFICAND = "failed to generate in-range floating-point significand"
FAILED_TO_FILTER = "failed to generate value satisfying filter"


class FloatWidth(Enum):
    """Target floating-point width."""

    FLOAT32 = 32
    FLOAT64 = 64


class ConfigurationError(ValueError):
    """Fatal caller mistake: invalid generator configuration or protocol misuse."""

    def __init__(self, message: str) -> None:
        super().__init__(f"could not construct a valid generator: {message}")
        self.reason = message


class GenerationError(Exception):
    """Base class for trial-level generation failures."""


class GenerationExhausted(GenerationError):
    """Raised when a bounded retry loop runs out of attempts."""

    def __init__(self, message: str, attempts: int) -> None:
        super().__init__(
            f"could not produce a value satisfying constraints after {attempts} attempts: "
            f"{message}"
        )
        self.reason = message
        self.attempts = attempts


class TraceOverrun(GenerationError):
    """Raised when a replayed trace has no more recorded draws."""
