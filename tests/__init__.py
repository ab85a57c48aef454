"""
Test package for bitdraw.

Unit tests cover sources, decoders and generators against scripted bit
buffers; property tests drive the same code from Hypothesis-chosen seeds.
"""

__all__ = [
    "conftest",  # Pytest configuration and fixtures
    "fixtures",  # Scripted sources and float helpers
    "property",  # Property-based test suite
    "unit",  # Unit test suite
]
