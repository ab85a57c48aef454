"""
Integer and boolean generators.
"""

from dataclasses import dataclass

from ..utilities.constants import ConfigurationError
from ..utilities.formatters import format_call
from ..utilities.validators import validate_range, validate_span
from .decoders import flip_coin, gen_int_range
from .generator import Generator
from .source import BitSource

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
UINT64_MAX = (1 << 64) - 1


@dataclass(frozen=True)
class _BoolGen:
    def describe(self) -> str:
        return "booleans()"

    def value(self, source: BitSource) -> bool:
        return flip_coin(source)


@dataclass(frozen=True)
class _IntGen:
    name: str
    min_value: int
    max_value: int
    explicit: bool = False

    def describe(self) -> str:
        if self.explicit:
            return format_call(self.name, self.min_value, self.max_value)
        return format_call(self.name)

    def value(self, source: BitSource) -> int:
        return gen_int_range(source, self.min_value, self.max_value, True)


def booleans() -> Generator[bool]:
    """Generator of uniformly drawn booleans."""
    return Generator(_BoolGen())


def ints() -> Generator[int]:
    """Generator of 64-bit signed integers, biased toward small magnitudes."""
    return Generator(_IntGen("ints", INT64_MIN, INT64_MAX))


def uint64s() -> Generator[int]:
    """Generator of 64-bit unsigned integers, biased toward small values."""
    return Generator(_IntGen("uint64s", 0, UINT64_MAX))


def ints_range(min_value: int, max_value: int) -> Generator[int]:
    """
    Generator of integers in [min_value, max_value].

    The all-zero encoding decodes to the in-range value closest to zero.

    Raises:
        ConfigurationError: If min_value >= max_value or the range spans more
            than 64 bits
    """
    validate_range(min_value, max_value)
    validate_span(min_value, max_value)
    return Generator(_IntGen("ints_range", min_value, max_value, explicit=True))


def uints_range(min_value: int, max_value: int) -> Generator[int]:
    """
    Generator of non-negative integers in [min_value, max_value].

    Raises:
        ConfigurationError: If min_value is negative, min_value >= max_value,
            or the range spans more than 64 bits
    """
    if min_value < 0:
        raise ConfigurationError(f"min_value must be non-negative, got {min_value}")
    validate_range(min_value, max_value)
    validate_span(min_value, max_value)
    return Generator(_IntGen("uints_range", min_value, max_value, explicit=True))
