"""
Bit sources and the group protocol.

A source is an ordered supply of raw bits with a nested group-labeling
protocol overlaid on the consumption trace. Drivers implement BitSource or
use one of the recording sources provided here.
"""

from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from ..domain.group import Group, Trace
from ..utilities.constants import ConfigurationError, TraceOverrun
from ..utilities.validators import validate_bit_count

logger = logging.getLogger(__name__)


@runtime_checkable
class BitSource(Protocol):
    """Minimal source contract used by decoders and generators.

    Structural typing lets drivers back a source with fresh entropy or
    with a replayed trace, as long as they implement these methods.
    """

    def draw_bits(self, n: int) -> int: ...

    def begin_group(self, label: str, forced: bool) -> int: ...

    def end_group(self, group_id: int, discard: bool) -> None: ...


class GroupScope:
    """
    Context manager that opens a group on enter and closes it on exit.

    Set ``discard`` inside the block to mark the span as abandoned. A group
    exited through an exception is always closed as discarded, so the
    trace stays well-nested when a trial aborts.
    """

    def __init__(self, source: BitSource, label: str, forced: bool = False) -> None:
        self.source = source
        self.label = label
        self.forced = forced
        self.discard = False
        self.group_id: int | None = None

    def __enter__(self) -> GroupScope:
        self.group_id = self.source.begin_group(self.label, self.forced)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.source.end_group(self.group_id, self.discard or exc_type is not None)
        return False


@dataclass
class _Frame:
    label: str
    forced: bool
    begin: int
    index: int
    parent: int | None
    depth: int


class RecordingSource(ABC):
    """
    Base source that owns the group stack and records the trace.

    Subclasses supply raw bits through ``_next_bits``; this class enforces
    stack discipline and keeps the draw and group records.
    """

    def __init__(self) -> None:
        self._draws: list[tuple[int, int]] = []
        self._stack: list[_Frame] = []
        self._closed: list[Group] = []
        self._opened = 0

    @abstractmethod
    def _next_bits(self, n: int) -> int:
        """Return the next n raw bits."""

    def draw_bits(self, n: int) -> int:
        """
        Draw n raw bits as an unsigned integer.

        Args:
            n: Number of bits, 0 to 64

        Returns:
            Value in [0, 2**n)

        Raises:
            ConfigurationError: If n is out of range
        """
        validate_bit_count(n)
        if n == 0:
            return 0

        value = self._next_bits(n) & ((1 << n) - 1)
        self._draws.append((n, value))
        return value

    def begin_group(self, label: str, forced: bool) -> int:
        """Open a labeled group and return its id."""
        parent = self._stack[-1].index if self._stack else None
        frame = _Frame(
            label=label,
            forced=forced,
            begin=len(self._draws),
            index=self._opened,
            parent=parent,
            depth=len(self._stack),
        )
        self._opened += 1
        self._stack.append(frame)
        return frame.index

    def end_group(self, group_id: int, discard: bool) -> None:
        """
        Close the innermost open group.

        Raises:
            ConfigurationError: If group_id is not the innermost open group
        """
        if not self._stack:
            raise ConfigurationError(f"end_group({group_id}) called with no open group")

        frame = self._stack[-1]
        if frame.index != group_id:
            raise ConfigurationError(
                f"end_group({group_id}) does not match innermost open group "
                f"{frame.index} ({frame.label!r})"
            )

        self._stack.pop()
        self._closed.append(
            Group(
                label=frame.label,
                forced=frame.forced,
                begin=frame.begin,
                end=len(self._draws),
                discard=discard,
                index=frame.index,
                parent=frame.parent,
                depth=frame.depth,
            )
        )
        if discard:
            logger.debug(f"Discarded group {frame.label!r} [{frame.begin}, {len(self._draws)})")

    @property
    def open_groups(self) -> int:
        """Number of groups currently open."""
        return len(self._stack)

    @property
    def draw_count(self) -> int:
        """Number of non-empty draws recorded so far."""
        return len(self._draws)

    def trace(self) -> Trace:
        """Snapshot of the draws and closed groups recorded so far."""
        groups = sorted(self._closed, key=lambda g: g.index)
        return Trace(draws=tuple(self._draws), groups=tuple(groups))


class RandomBitSource(RecordingSource):
    """Source backed by a seeded pseudo-random bit supply."""

    def __init__(self, seed: int | None = None) -> None:
        super().__init__()
        self.seed = seed
        self._random = random.Random(seed)

    def _next_bits(self, n: int) -> int:
        return self._random.getrandbits(n)

    def __repr__(self) -> str:
        """Representation for debugging."""
        return f"RandomBitSource(seed={self.seed!r})"


class ReplayBitSource(RecordingSource):
    """
    Source that replays previously recorded draw values in order.

    Each value is masked to the width requested at replay time, so a
    rewritten buffer (for example one produced by a shrinker) is always
    decodable.
    """

    def __init__(self, values: Iterable[int]) -> None:
        super().__init__()
        self._values = list(values)
        self._position = 0

    @classmethod
    def from_trace(cls, trace: Trace) -> ReplayBitSource:
        """Create a replay source from a recorded trace."""
        return cls(trace.values)

    def _next_bits(self, n: int) -> int:
        if self._position >= len(self._values):
            raise TraceOverrun(f"replay exhausted after {self._position} draws")

        value = self._values[self._position]
        self._position += 1
        return value

    @property
    def remaining(self) -> int:
        """Number of recorded values not yet replayed."""
        return len(self._values) - self._position

    def __repr__(self) -> str:
        """Representation for debugging."""
        return f"ReplayBitSource({len(self._values)} values)"
