"""
FloatFormat value object for IEEE-754 binary layouts.

Describes field widths of a binary floating-point format and converts
between Python floats and the format's raw bit patterns.
"""

import math
import struct
from dataclasses import dataclass

from ..utilities.constants import FloatWidth


@dataclass(frozen=True)
class FloatFormat:
    """
    Immutable IEEE-754 binary format description.

    Python floats are always binary64; 32-bit values are built in binary32
    layout and widened exactly, so every produced value is representable
    in the target format.
    """

    width: FloatWidth
    exp_bits: int
    signif_bits: int
    max_value: float

    def __post_init__(self):
        """Validate layout after initialization."""
        if 1 + self.exp_bits + self.signif_bits != self.width.value:
            raise ValueError(
                f"Field widths {self.exp_bits}+{self.signif_bits}+1 do not add up to "
                f"{self.width.value}"
            )

    @property
    def bias(self) -> int:
        """Exponent bias."""
        return (1 << (self.exp_bits - 1)) - 1

    @property
    def special_exponent(self) -> int:
        """Unbiased exponent shared by infinities and NaN."""
        return (1 << self.exp_bits) - 1 - self.bias

    @property
    def _codes(self) -> tuple[str, str]:
        if self.width == FloatWidth.FLOAT32:
            return "<f", "<I"
        return "<d", "<Q"

    def to_bits(self, f: float) -> int:
        """Raw bit pattern of f in this format."""
        float_code, int_code = self._codes
        return struct.unpack(int_code, struct.pack(float_code, f))[0]

    def from_bits(self, bits: int) -> float:
        """Float value of a raw bit pattern in this format."""
        float_code, int_code = self._codes
        return struct.unpack(float_code, struct.pack(int_code, bits))[0]

    def unbiased_exponent(self, f: float) -> int:
        """
        Unbiased exponent field of a non-negative value.

        Zero and subnormals map to ``-bias``; infinity and NaN map to
        ``special_exponent``.
        """
        if math.isinf(f) or math.isnan(f):
            return self.special_exponent
        sign_mask = (1 << (self.width.value - 1)) - 1
        return ((self.to_bits(f) & sign_mask) >> self.signif_bits) - self.bias

    def assemble(self, exponent: int, significand: int) -> float:
        """Build a non-negative float from an unbiased exponent and significand."""
        return self.from_bits(((exponent + self.bias) << self.signif_bits) | significand)

    def __str__(self) -> str:
        """String representation."""
        return f"float{self.width.value}"


FLOAT32 = FloatFormat(
    width=FloatWidth.FLOAT32,
    exp_bits=8,
    signif_bits=23,
    max_value=3.4028234663852886e38,
)

FLOAT64 = FloatFormat(
    width=FloatWidth.FLOAT64,
    exp_bits=11,
    signif_bits=52,
    max_value=1.7976931348623157e308,
)
