"""
bitdraw - the generation core of a property-based testing library.

This package turns a stream of raw bits into structured values:
- Bit sources with a nested group protocol for shrinkers
- Shrink-friendly integer and IEEE-754 float decoders
- Bounded rejection sampling
- Generators and combinators (map, filter, one_of, sampled_from, ...)

Every value is a deterministic function of the bits drawn, so replaying a
recorded trace reproduces it exactly.
"""

__version__ = "1.0.0"
__author__ = "bitdraw Developers"
__description__ = "Deterministic bit-stream value generation for property-based testing"

from .config import GenerationConfig, get_generation_config
from .core import (
    BitSource,
    Generator,
    RandomBitSource,
    ReplayBitSource,
    booleans,
    custom,
    filter_,
    float32s,
    float32s_ex,
    float64s,
    float64s_ex,
    ints,
    ints_range,
    just,
    map_,
    one_of,
    ptrs,
    sampled_from,
    uint64s,
    uints_range,
)
from .domain import Group, Trace
from .utilities.constants import (
    ConfigurationError,
    GenerationError,
    GenerationExhausted,
    TraceOverrun,
)
from .utilities.trace_view import render_trace

__all__ = [
    "BitSource",
    "ConfigurationError",
    "GenerationConfig",
    "GenerationError",
    "GenerationExhausted",
    "Generator",
    "Group",
    "RandomBitSource",
    "ReplayBitSource",
    "Trace",
    "TraceOverrun",
    "booleans",
    "custom",
    "filter_",
    "float32s",
    "float32s_ex",
    "float64s",
    "float64s_ex",
    "get_generation_config",
    "ints",
    "ints_range",
    "just",
    "map_",
    "one_of",
    "ptrs",
    "render_trace",
    "sampled_from",
    "uint64s",
    "uints_range",
]
