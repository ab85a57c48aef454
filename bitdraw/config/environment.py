"""
Environment-driven configuration.

Reads retry-budget overrides from ``BITDRAW_*`` environment variables.
"""

import logging
import os
from collections.abc import Mapping

from ..utilities.constants import ConfigurationError
from .generation_config import DEFAULT_CONFIG, GenerationConfig

logger = logging.getLogger(__name__)

ENV_PREFIX = "BITDRAW_"

_ENV_FIELDS = {
    "FILTER_TRIES": "filter_tries",
    "SIGNIFICAND_TRIES": "significand_tries",
}


def get_generation_config(environ: Mapping[str, str] | None = None) -> GenerationConfig:
    """
    Build a GenerationConfig from environment overrides.

    Args:
        environ: Mapping to read instead of os.environ

    Returns:
        Default configuration with any overrides applied

    Raises:
        ConfigurationError: If an override is not a positive integer
    """
    env = os.environ if environ is None else environ
    overrides: dict[str, int] = {}

    for suffix, field_name in _ENV_FIELDS.items():
        raw = env.get(ENV_PREFIX + suffix)
        if raw is None or not raw.strip():
            continue
        try:
            overrides[field_name] = int(raw)
        except ValueError as e:
            raise ConfigurationError(f"{ENV_PREFIX}{suffix} must be an integer, got {raw!r}") from e

    if overrides:
        logger.debug(f"Generation config overrides from environment: {overrides}")
        return DEFAULT_CONFIG.with_overrides(**overrides)
    return DEFAULT_CONFIG
