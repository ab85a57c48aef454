"""
Bounded rejection sampling.
"""

import logging
from collections.abc import Callable
from typing import TypeVar

from ..utilities.constants import TRY_LABEL, GenerationExhausted
from ..utilities.validators import validate_positive_number
from .source import BitSource, GroupScope

logger = logging.getLogger(__name__)

T = TypeVar("T")


def satisfy(
    predicate: Callable[[T], bool],
    produce_once: Callable[[BitSource], T],
    source: BitSource,
    max_tries: int,
    failure_message: str,
) -> T:
    """
    Produce values until one satisfies the predicate.

    Each attempt runs inside its own ``try`` group; rejected attempts close
    their group with the discard flag set. Their bits stay consumed.

    Args:
        predicate: Acceptance test for a candidate
        produce_once: Function drawing one candidate from the source
        source: Bit source to consume
        max_tries: Attempt budget
        failure_message: Reason reported on exhaustion

    Returns:
        The first accepted candidate

    Raises:
        GenerationExhausted: If no candidate is accepted within max_tries
        ConfigurationError: If max_tries is not positive
    """
    validate_positive_number(max_tries, "max_tries")

    for _ in range(max_tries):
        with GroupScope(source, TRY_LABEL) as attempt:
            value = produce_once(source)
            ok = predicate(value)
            attempt.discard = not ok
        if ok:
            return value

    logger.warning(f"Rejection sampling exhausted after {max_tries} attempts: {failure_message}")
    raise GenerationExhausted(failure_message, max_tries)
