"""
Floating-point generators.

Floats are drawn field by field: an exponent under a ``floatexp`` group and
a significand under a ``floatsignif`` group, then a sign bit. The integer
part of the significand is drawn unbiased and the fractional part biased,
so zeroing bits shrinks toward values with short binary fractions.
"""

import logging
import math
from dataclasses import dataclass

from ..config import GenerationConfig, get_generation_config
from ..domain.float_format import FLOAT32, FLOAT64, FloatFormat
from ..utilities.constants import (
    FAILED_TO_GEN_FLOAT,
    FAILED_TO_GEN_SIGNIFICAND,
    FLOAT_EXP_LABEL,
    FLOAT_SIGNIF_LABEL,
    SIGNIFICAND_TRIES,
    ConfigurationError,
    GenerationExhausted,
)
from ..utilities.formatters import format_call
from .decoders import flip_coin, gen_int_range, gen_uint_n, gen_uint_n_width
from .generator import Generator
from .rejection import satisfy
from .source import BitSource, GroupScope

logger = logging.getLogger(__name__)


def _fractional_bits(exponent: int, fmt: FloatFormat) -> int:
    if exponent <= 0 or exponent == fmt.special_exponent:
        return fmt.signif_bits
    if exponent >= fmt.signif_bits:
        return 0
    return fmt.signif_bits - exponent


# TODO: rejection sampling converges slowly when [min_value, max_value] covers a
# small part of one binade; draw the significand within the binade's bounds.
def gen_ufloat_range(
    source: BitSource,
    min_value: float,
    max_value: float,
    fmt: FloatFormat = FLOAT64,
    allow_nan: bool = False,
    max_tries: int = SIGNIFICAND_TRIES,
) -> float:
    """
    Draw a non-negative float in [min_value, max_value].

    The exponent is drawn once; the significand is redrawn until the
    assembled value lands in range. With ``max_value`` infinite the special
    exponent is drawable, giving infinity for a zero significand and NaN
    otherwise; NaN is accepted only when ``allow_nan`` is set.

    Args:
        source: Bit source to consume
        min_value: Inclusive lower bound, non-negative
        max_value: Inclusive upper bound, greater than min_value
        fmt: Target binary format
        allow_nan: Accept NaN results
        max_tries: Significand attempt budget

    Returns:
        Float exactly representable in fmt

    Raises:
        ConfigurationError: If the bounds are invalid
        GenerationExhausted: If no significand lands in range
    """
    if not (min_value >= 0 and min_value < max_value):
        raise ConfigurationError(
            f"float range must satisfy 0 <= min_value < max_value, got [{min_value}, {max_value}]"
        )
    if min_value > fmt.max_value:
        raise ConfigurationError(f"min_value {min_value} exceeds the largest finite {fmt}")
    if math.isfinite(max_value) and max_value > fmt.max_value:
        raise ConfigurationError(f"max_value {max_value} exceeds the largest finite {fmt}")

    exp_lo = fmt.unbiased_exponent(min_value)
    exp_hi = fmt.unbiased_exponent(max_value)
    with GroupScope(source, FLOAT_EXP_LABEL):
        exponent = exp_lo if exp_lo == exp_hi else gen_int_range(source, exp_lo, exp_hi, True)

    frac_bits = _fractional_bits(exponent, fmt)
    int_bits = fmt.signif_bits - frac_bits

    for _ in range(max_tries):
        with GroupScope(source, FLOAT_SIGNIF_LABEL) as g:
            si = gen_uint_n(source, (1 << int_bits) - 1, False)
            sf, sf_width = gen_uint_n_width(source, (1 << frac_bits) - 1, True)
            significand = si << frac_bits | sf << (frac_bits - sf_width)
            f = fmt.assemble(exponent, significand)
            ok = min_value <= f <= max_value or (allow_nan and math.isnan(f))
            g.discard = not ok
        if ok:
            return f

    logger.warning(f"No significand in range after {max_tries} attempts (exponent {exponent})")
    raise GenerationExhausted(FAILED_TO_GEN_SIGNIFICAND, max_tries)


@dataclass(frozen=True)
class _FloatGen:
    fmt: FloatFormat
    allow_inf: bool
    allow_nan: bool
    config: GenerationConfig
    extended: bool = False

    def describe(self) -> str:
        name = f"float{self.fmt.width.value}s"
        if not self.extended:
            return format_call(name)
        return format_call(f"{name}_ex", allow_inf=self.allow_inf, allow_nan=self.allow_nan)

    def _acceptable(self, f: float) -> bool:
        if not self.allow_inf and (f < -self.fmt.max_value or f > self.fmt.max_value):
            return False
        if not self.allow_nan and f != f:
            return False
        return True

    def _value_once(self, source: BitSource) -> float:
        upper = math.inf if self.allow_inf or self.allow_nan else self.fmt.max_value
        f = gen_ufloat_range(
            source,
            0.0,
            upper,
            self.fmt,
            allow_nan=self.allow_nan,
            max_tries=self.config.significand_tries,
        )
        if flip_coin(source):
            f = -f
        return f

    def value(self, source: BitSource) -> float:
        return satisfy(
            self._acceptable,
            self._value_once,
            source,
            self.config.float_gen_tries,
            FAILED_TO_GEN_FLOAT,
        )


def _float_generator(
    fmt: FloatFormat,
    allow_inf: bool,
    allow_nan: bool,
    config: GenerationConfig | None,
    extended: bool,
) -> Generator[float]:
    cfg = config or get_generation_config()
    return Generator(_FloatGen(fmt, allow_inf, allow_nan, cfg, extended))


def float32s(config: GenerationConfig | None = None) -> Generator[float]:
    """Generator of finite binary32 values, widened to Python floats."""
    return _float_generator(FLOAT32, False, False, config, extended=False)


def float64s(config: GenerationConfig | None = None) -> Generator[float]:
    """Generator of finite binary64 values."""
    return _float_generator(FLOAT64, False, False, config, extended=False)


def float32s_ex(
    allow_inf: bool, allow_nan: bool, config: GenerationConfig | None = None
) -> Generator[float]:
    """Generator of binary32 values with explicit infinity and NaN policy."""
    return _float_generator(FLOAT32, allow_inf, allow_nan, config, extended=True)


def float64s_ex(
    allow_inf: bool, allow_nan: bool, config: GenerationConfig | None = None
) -> Generator[float]:
    """
    Generator of binary64 values with explicit infinity and NaN policy.

    Args:
        allow_inf: Allow positive and negative infinity
        allow_nan: Allow NaN
        config: Retry budgets, read from the environment when omitted
    """
    return _float_generator(FLOAT64, allow_inf, allow_nan, config, extended=True)
