"""
Primitive numeric decoders.

Pure functions that consume bits from a source to produce bounded unsigned
and signed integers. Biased decoders make the all-zero bit pattern decode to
the value closest to zero and make shorter encodings decode to smaller
values, which is what lets a shrinker converge by zeroing bits.
"""

import logging

from ..utilities.constants import (
    UINT_BIASED_LABEL,
    UINT_LABEL,
    UINT_REJECT_TRIES,
    ConfigurationError,
)
from ..utilities.validators import validate_positive_number, validate_range, validate_span
from .source import BitSource, GroupScope

logger = logging.getLogger(__name__)


def flip_coin(source: BitSource) -> bool:
    """Draw one unbiased bit."""
    return source.draw_bits(1) == 1


def _gen_uint_unbiased(source: BitSource, max_value: int) -> int:
    bitlen = max_value.bit_length()
    u = 0
    for attempt in range(UINT_REJECT_TRIES):
        last = attempt == UINT_REJECT_TRIES - 1
        with GroupScope(source, UINT_LABEL) as g:
            u = source.draw_bits(bitlen)
            g.discard = u > max_value and not last
        if u <= max_value:
            return u

    # Out of rejections: clamp the final draw, which was kept in the trace.
    logger.debug(f"Clamped {u} to {max_value} after {UINT_REJECT_TRIES} rejected draws")
    return max_value


def _gen_uint_biased(source: BitSource, max_value: int) -> tuple[int, int]:
    bitlen = max_value.bit_length()
    with GroupScope(source, UINT_BIASED_LABEL):
        width = _gen_uint_unbiased(source, bitlen)
        u = source.draw_bits(width)
    return min(u, max_value), width


def gen_uint_n_width(source: BitSource, max_value: int, biased: bool) -> tuple[int, int]:
    """
    Draw an unsigned integer in [0, max_value] and report the bits used.

    The biased encoding first draws a width uniformly in
    [0, bit_length(max_value)] and then that many value bits, so the
    reported width can be smaller than bit_length(max_value).

    Args:
        source: Bit source to consume
        max_value: Inclusive upper bound, non-negative
        biased: Favor 0 and short encodings

    Returns:
        Tuple of (value, width_used)

    Raises:
        ConfigurationError: If max_value is negative or wider than 64 bits
    """
    if max_value < 0:
        raise ConfigurationError(f"max_value must be non-negative, got {max_value}")
    validate_span(0, max_value)
    if max_value == 0:
        return 0, 0

    if biased:
        return _gen_uint_biased(source, max_value)
    return _gen_uint_unbiased(source, max_value), max_value.bit_length()


def gen_uint_n(source: BitSource, max_value: int, biased: bool) -> int:
    """Draw an unsigned integer in [0, max_value]."""
    value, _ = gen_uint_n_width(source, max_value, biased)
    return value


def gen_int_range(source: BitSource, min_value: int, max_value: int, biased: bool) -> int:
    """
    Draw a signed integer in [min_value, max_value].

    Unbiased draws are uniform over the range. Biased draws decode the
    all-zero pattern to the in-range value closest to zero; for ranges that
    straddle zero a sign bit picks the side first.

    Raises:
        ConfigurationError: If min_value >= max_value or the range spans more
            than 64 bits
    """
    validate_range(min_value, max_value)
    validate_span(min_value, max_value)

    if not biased:
        return min_value + gen_uint_n(source, max_value - min_value, False)

    if min_value >= 0:
        return min_value + gen_uint_n(source, max_value - min_value, True)
    if max_value <= 0:
        return max_value - gen_uint_n(source, max_value - min_value, True)

    if flip_coin(source):
        return -1 - gen_uint_n(source, -min_value - 1, True)
    return gen_uint_n(source, max_value, True)


def gen_index(source: BitSource, n: int, biased: bool = False) -> int:
    """
    Draw an index in [0, n).

    A single-element range consumes no bits.

    Raises:
        ConfigurationError: If n is not positive
    """
    validate_positive_number(n, "index range size")
    return gen_uint_n(source, n - 1, biased)
