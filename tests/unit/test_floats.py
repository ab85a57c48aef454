"""
Unit tests for floating-point generation.

Scripted buffers below follow the draw order of one float: sign coin of the
exponent, exponent width, exponent bits, significand width, significand
bits, sign bit.
"""

import math

import pytest

from bitdraw.config import GenerationConfig
from bitdraw.core.floats import float32s, float32s_ex, float64s, float64s_ex, gen_ufloat_range
from bitdraw.core.source import RandomBitSource, ReplayBitSource
from bitdraw.domain.float_format import FLOAT32, FLOAT64
from bitdraw.utilities.constants import (
    FLOAT_EXP_LABEL,
    FLOAT_SIGNIF_LABEL,
    TRY_LABEL,
    ConfigurationError,
    GenerationExhausted,
)
from tests.fixtures.sources import PaddedReplaySource, is_float32

# exponent +1024 (width 11, bits clamped), zero significand
FLOAT64_POS_INF = [0, 11, 2047, 0, 0]
FLOAT64_NEG_INF = [0, 11, 2047, 0, 1]
# exponent +1024, significand width 1 with its bit set
FLOAT64_NAN = [0, 11, 2047, 1, 1, 0]
# exponent +128 (width 8, bits clamped), zero significand
FLOAT32_POS_INF = [0, 8, 255, 0, 0]


class TestDescriptions:
    """Test cases for generator descriptions."""

    def test_default_forms(self):
        """Test default generators omit the flags."""
        assert float32s().describe() == "float32s()"
        assert str(float64s()) == "float64s()"

    def test_extended_forms(self):
        """Test extended generators always name both flags."""
        assert str(float64s_ex(True, False)) == "float64s_ex(allow_inf=True, allow_nan=False)"
        assert str(float32s_ex(False, True)) == "float32s_ex(allow_inf=False, allow_nan=True)"
        assert str(float64s_ex(False, False)) == "float64s_ex(allow_inf=False, allow_nan=False)"


class TestSpecialValues:
    """Test cases for infinity and NaN handling."""

    def test_zero_bits_shrink_to_one(self, zero_source):
        """Test the all-zero encoding decodes to 1.0."""
        assert float64s().value(zero_source) == 1.0
        assert float32s().value(zero_source) == 1.0

    def test_positive_infinity(self):
        """Test +inf is reachable when allowed."""
        assert float64s_ex(True, True).value(ReplayBitSource(FLOAT64_POS_INF)) == math.inf

    def test_negative_infinity(self):
        """Test -inf is reachable when allowed."""
        assert float64s_ex(True, False).value(ReplayBitSource(FLOAT64_NEG_INF)) == -math.inf

    def test_nan(self):
        """Test NaN is reachable when allowed."""
        assert math.isnan(float64s_ex(False, True).value(ReplayBitSource(FLOAT64_NAN)))

    def test_float32_infinity(self):
        """Test binary32 infinity uses the binary32 special exponent."""
        assert float32s_ex(True, False).value(ReplayBitSource(FLOAT32_POS_INF)) == math.inf

    def test_infinity_rejected_when_disallowed(self):
        """Test an infinite attempt is discarded and retried when only NaN is allowed."""
        source = PaddedReplaySource(FLOAT64_POS_INF)
        assert float64s_ex(False, True).value(source) == 1.0

        tries = source.trace().labeled(TRY_LABEL)
        assert [g.discard for g in tries] == [True, False]

    def test_nan_rejected_in_significand_loop(self):
        """Test a NaN significand is redrawn when NaN is not allowed."""
        source = PaddedReplaySource(FLOAT64_NAN)
        assert float64s_ex(True, False).value(source) == math.inf

        signif = source.trace().labeled(FLOAT_SIGNIF_LABEL)
        assert [g.discard for g in signif] == [True, False]

    def test_outer_budget_exhaustion(self):
        """Test the outer range check gives up after its budget."""
        config = GenerationConfig(float_gen_tries=2)
        source = ReplayBitSource(FLOAT64_POS_INF * 2)
        with pytest.raises(GenerationExhausted) as exc_info:
            float64s_ex(False, True, config=config).value(source)
        assert exc_info.value.attempts == 2
        assert source.open_groups == 0


class TestGenUfloatRange:
    """Test cases for the unsigned range helper."""

    @pytest.mark.parametrize("bounds", [(1.0, 0.5), (-1.0, 1.0), (1.0, 1.0)])
    def test_invalid_bounds(self, bounds):
        """Test invalid bounds are configuration errors."""
        with pytest.raises(ConfigurationError):
            gen_ufloat_range(RandomBitSource(0), *bounds)

    @pytest.mark.parametrize("bounds", [(0.0, 1e300), (1e300, math.inf), (1e300, 1e301)])
    def test_bounds_beyond_format(self, bounds):
        """Test a finite bound beyond the format is a configuration error."""
        source = RandomBitSource(0)
        with pytest.raises(ConfigurationError):
            gen_ufloat_range(source, *bounds, FLOAT32)
        assert source.draw_count == 0

    def test_unit_interval(self):
        """Test [0, 1.0] with 52 significand bits always lands in range."""
        for seed in range(300):
            f = gen_ufloat_range(RandomBitSource(seed), 0.0, 1.0, FLOAT64)
            assert 0.0 <= f <= 1.0

    def test_single_binade_draws_no_exponent_bits(self):
        """Test a range within one binade fixes the exponent."""
        source = RandomBitSource(4)
        f = gen_ufloat_range(source, 1.0, 1.5, FLOAT64)
        assert 1.0 <= f <= 1.5

        exp_group = source.trace().labeled(FLOAT_EXP_LABEL)[0]
        assert exp_group.is_empty()

    def test_significand_exhaustion(self):
        """Test the significand loop gives up after its budget."""
        # exponent 0, then twice significand width 1 with the bit set: 1.5 is outside [0, 1]
        source = ReplayBitSource([0, 1, 1, 1, 1])
        with pytest.raises(GenerationExhausted):
            gen_ufloat_range(source, 0.0, 1.0, FLOAT64, max_tries=2)
        assert source.open_groups == 0

    def test_groups_labeled(self):
        """Test exponent and significand draws are grouped."""
        source = RandomBitSource(11)
        gen_ufloat_range(source, 0.0, FLOAT64.max_value, FLOAT64)
        trace = source.trace()
        assert len(trace.labeled(FLOAT_EXP_LABEL)) == 1
        assert len(trace.labeled(FLOAT_SIGNIF_LABEL)) >= 1

    def test_float32_values_representable(self):
        """Test binary32 draws are exact binary32 values."""
        for seed in range(200):
            f = gen_ufloat_range(RandomBitSource(seed), 0.0, FLOAT32.max_value, FLOAT32)
            assert 0.0 <= f <= FLOAT32.max_value
            assert is_float32(f)
