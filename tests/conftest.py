"""
Pytest configuration and shared fixtures for bitdraw tests.

Provides markers, source fixtures and a retry configuration tuned for
fast exhaustion tests.
"""

import pytest

from bitdraw.config import GenerationConfig
from bitdraw.core.source import RandomBitSource

from .fixtures.sources import PaddedReplaySource


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: mark test as unit test (fast, isolated)")
    config.addinivalue_line("markers", "property: mark test as property-based test")
    config.addinivalue_line("markers", "slow: mark test as slow running")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on test location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "property" in str(item.fspath):
            item.add_marker(pytest.mark.property)


# Source fixtures
@pytest.fixture
def random_source() -> RandomBitSource:
    """Create a seeded random source."""
    return RandomBitSource(12345)


@pytest.fixture
def zero_source() -> PaddedReplaySource:
    """Create a source producing only zero bits."""
    return PaddedReplaySource([])


@pytest.fixture
def tight_config() -> GenerationConfig:
    """Create a configuration with small retry budgets."""
    return GenerationConfig(filter_tries=3, float_gen_tries=3, significand_tries=3)
