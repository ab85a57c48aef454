"""
Core generation machinery: sources, decoders, rejection sampling and
generators.
"""

from .decoders import flip_coin, gen_index, gen_int_range, gen_uint_n, gen_uint_n_width
from .floats import float32s, float32s_ex, float64s, float64s_ex, gen_ufloat_range
from .generator import (
    Generator,
    GeneratorImpl,
    custom,
    filter_,
    just,
    map_,
    one_of,
    ptrs,
    sampled_from,
)
from .integers import booleans, ints, ints_range, uint64s, uints_range
from .rejection import satisfy
from .source import BitSource, GroupScope, RandomBitSource, RecordingSource, ReplayBitSource

__all__ = [
    # Sources
    "BitSource",
    "GroupScope",
    "RandomBitSource",
    "RecordingSource",
    "ReplayBitSource",
    # Decoders
    "flip_coin",
    "gen_index",
    "gen_int_range",
    "gen_uint_n",
    "gen_uint_n_width",
    "satisfy",
    # Generators
    "Generator",
    "GeneratorImpl",
    "booleans",
    "custom",
    "filter_",
    "float32s",
    "float32s_ex",
    "float64s",
    "float64s_ex",
    "gen_ufloat_range",
    "ints",
    "ints_range",
    "just",
    "map_",
    "one_of",
    "ptrs",
    "sampled_from",
    "uint64s",
    "uints_range",
]
