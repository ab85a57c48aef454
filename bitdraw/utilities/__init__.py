"""
Utilities package for bitdraw.

This package contains constants and error types, input validators,
description formatters and trace rendering.
"""

from .constants import (
    FLOAT_EXP_LABEL,
    FLOAT_SIGNIF_LABEL,
    ConfigurationError,
    FloatWidth,
    GenerationError,
    GenerationExhausted,
    TraceOverrun,
)
from .formatters import format_call, format_callable, format_sequence, format_value
from .trace_view import print_trace, render_trace
from .validators import (
    validate_bit_count,
    validate_non_empty,
    validate_positive_number,
    validate_range,
    validate_span,
)

__all__ = [
    # Constants and errors
    "FLOAT_EXP_LABEL",
    "FLOAT_SIGNIF_LABEL",
    "ConfigurationError",
    "FloatWidth",
    "GenerationError",
    "GenerationExhausted",
    "TraceOverrun",
    # Formatting utilities
    "format_call",
    "format_callable",
    "format_sequence",
    "format_value",
    # Trace rendering
    "print_trace",
    "render_trace",
    # Validation utilities
    "validate_bit_count",
    "validate_non_empty",
    "validate_positive_number",
    "validate_range",
    "validate_span",
]
