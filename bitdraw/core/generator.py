"""
Generator abstraction and combinators.

A Generator wraps an implementation object that knows how to describe
itself and how to produce a value from a bit source. Combinators build new
generators by wrapping existing ones; none of them keeps state between
invocations.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

from ..config import GenerationConfig, get_generation_config
from ..utilities.constants import FAILED_TO_FILTER, ONE_OF_LABEL, PTR_LABEL
from ..utilities.formatters import format_call, format_callable, format_sequence, format_value
from ..utilities.validators import validate_non_empty
from .decoders import flip_coin, gen_index
from .rejection import satisfy
from .source import BitSource, GroupScope

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")
T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class GeneratorImpl(Protocol[T_co]):
    """Contract for the object a Generator wraps."""

    def describe(self) -> str: ...

    def value(self, source: BitSource) -> T_co: ...


@dataclass(frozen=True)
class Generator(Generic[T]):
    """
    Immutable value producer with a stable description.

    Every produced value is drawn inside a forced group labeled with the
    generator's description, so the group tree mirrors the generator
    structure.
    """

    impl: GeneratorImpl[T]
    description: str = field(init=False, compare=False)

    def __post_init__(self):
        """Cache the description after initialization."""
        object.__setattr__(self, "description", self.impl.describe())

    def describe(self) -> str:
        """Human-readable label derived from configuration only."""
        return self.description

    def value(self, source: BitSource) -> T:
        """Produce one value from the source."""
        with GroupScope(source, self.description, forced=True):
            return self.impl.value(source)

    def draw(self, source: BitSource, label: str = "") -> T:
        """
        Produce one value and log it under a label.

        Args:
            source: Bit source owned by the current trial
            label: Name for the drawn value, empty to skip logging

        Returns:
            The produced value
        """
        v = self.value(source)
        if label:
            logger.debug(f"draw {label}: {v!r}")
        return v

    def map(self, fn: Callable[[T], U]) -> Generator[U]:
        """Transform produced values with fn."""
        return map_(self, fn)

    def filter(
        self, predicate: Callable[[T], bool], config: GenerationConfig | None = None
    ) -> Generator[T]:
        """Keep only values satisfying predicate."""
        return filter_(self, predicate, config)

    def __str__(self) -> str:
        """String representation."""
        return self.description

    def __repr__(self) -> str:
        """Representation for debugging."""
        return f"Generator({self.description})"


@dataclass(frozen=True)
class _CustomGen(Generic[T]):
    fn: Callable[[BitSource], T]

    def describe(self) -> str:
        return format_call("custom", format_callable(self.fn))

    def value(self, source: BitSource) -> T:
        return self.fn(source)


@dataclass(frozen=True)
class _MappedGen(Generic[T, U]):
    gen: Generator[T]
    fn: Callable[[T], U]

    def describe(self) -> str:
        return f"{self.gen}.map({format_callable(self.fn)})"

    def value(self, source: BitSource) -> U:
        return self.fn(self.gen.value(source))


@dataclass(frozen=True)
class _FilteredGen(Generic[T]):
    gen: Generator[T]
    predicate: Callable[[T], bool]
    max_tries: int

    def describe(self) -> str:
        return f"{self.gen}.filter({format_callable(self.predicate)})"

    def value(self, source: BitSource) -> T:
        return satisfy(self.predicate, self.gen.value, source, self.max_tries, FAILED_TO_FILTER)


@dataclass(frozen=True)
class _OneOfGen(Generic[T]):
    gens: tuple[Generator[T], ...]

    def describe(self) -> str:
        return format_call("one_of", *self.gens)

    def value(self, source: BitSource) -> T:
        with GroupScope(source, ONE_OF_LABEL):
            i = gen_index(source, len(self.gens))
        return self.gens[i].value(source)


@dataclass(frozen=True)
class _JustGen(Generic[T]):
    constant: T

    def describe(self) -> str:
        return format_call("just", format_value(self.constant))

    def value(self, source: BitSource) -> T:
        return self.constant


@dataclass(frozen=True)
class _SampledFromGen(Generic[T]):
    values: tuple[T, ...]

    def describe(self) -> str:
        return format_call("sampled_from", format_sequence(self.values))

    def value(self, source: BitSource) -> T:
        return self.values[gen_index(source, len(self.values))]


@dataclass(frozen=True)
class _PtrGen(Generic[T]):
    gen: Generator[T]
    allow_nil: bool

    def describe(self) -> str:
        return format_call("ptrs", self.gen, allow_nil=self.allow_nil)

    def value(self, source: BitSource) -> T | None:
        if self.allow_nil:
            with GroupScope(source, PTR_LABEL):
                nil = flip_coin(source)
            if nil:
                return None
        return self.gen.value(source)


def custom(fn: Callable[[BitSource], T]) -> Generator[T]:
    """
    Wrap a user function as a generator.

    The function receives the trial's source and typically draws from other
    generators. Its determinism is the caller's responsibility.
    """
    return Generator(_CustomGen(fn))


def map_(gen: Generator[T], fn: Callable[[T], U]) -> Generator[U]:
    """Generator producing fn applied to gen's values; draws no extra bits."""
    return Generator(_MappedGen(gen, fn))


def filter_(
    gen: Generator[T],
    predicate: Callable[[T], bool],
    config: GenerationConfig | None = None,
) -> Generator[T]:
    """
    Generator retrying gen until predicate holds.

    Each attempt is a full draw from gen inside its own discardable group.
    The attempt budget comes from ``config.filter_tries``.

    Raises:
        GenerationExhausted: At draw time, when the budget is spent
    """
    cfg = config or get_generation_config()
    return Generator(_FilteredGen(gen, predicate, cfg.filter_tries))


def one_of(*gens: Generator[Any]) -> Generator[Any]:
    """
    Generator delegating to one branch chosen uniformly.

    A nested one_of counts as a single branch.

    Raises:
        ConfigurationError: If no generators are given
    """
    validate_non_empty(gens, "one_of generators")
    return Generator(_OneOfGen(tuple(gens)))


def just(value: T) -> Generator[T]:
    """Generator that always returns value and consumes no bits."""
    return Generator(_JustGen(value))


def sampled_from(values: Iterable[T]) -> Generator[T]:
    """
    Generator returning a uniformly chosen element of values.

    Raises:
        ConfigurationError: If values is empty
    """
    items = tuple(values)
    validate_non_empty(items, "sampled_from values")
    return Generator(_SampledFromGen(items))


def ptrs(gen: Generator[T], allow_nil: bool) -> Generator[T | None]:
    """Generator wrapping gen's values as optional, None only if allow_nil."""
    return Generator(_PtrGen(gen, allow_nil))
