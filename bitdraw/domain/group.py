"""
Group and Trace value objects.

A Group is one closed, labeled span over the draws of a generation. A Trace
is the complete replayable record of one generation: every raw draw in order
plus every closed group.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Group:
    """
    Immutable record of a closed group.

    The span is half-open over draw indices: draws ``begin`` up to but not
    including ``end`` were consumed while this group was open. ``index`` is
    the group's position in opening order and ``parent`` the index of the
    enclosing group, if any.
    """

    label: str
    forced: bool
    begin: int
    end: int
    discard: bool = False
    index: int = 0
    parent: int | None = None
    depth: int = 0

    def __post_init__(self):
        """Validate span after initialization."""
        if self.begin < 0 or self.end < self.begin:
            raise ValueError(f"Invalid group span: [{self.begin}, {self.end})")
        if self.parent is not None and self.parent >= self.index:
            raise ValueError(f"Parent {self.parent} must open before group {self.index}")

    @property
    def size(self) -> int:
        """Number of draws covered by the group."""
        return self.end - self.begin

    def is_empty(self) -> bool:
        """Check if the group covers no draws."""
        return self.begin == self.end

    def is_root(self) -> bool:
        """Check if the group has no enclosing group."""
        return self.parent is None

    def __str__(self) -> str:
        """String representation."""
        flags = []
        if self.forced:
            flags.append("forced")
        if self.discard:
            flags.append("discard")
        suffix = f" ({', '.join(flags)})" if flags else ""
        return f"{self.label} [{self.begin}, {self.end}){suffix}"


@dataclass(frozen=True)
class Trace:
    """
    Immutable record of one generation.

    ``draws`` holds ``(bit_width, value)`` pairs in consumption order;
    ``groups`` holds closed groups in opening order.
    """

    draws: tuple[tuple[int, int], ...] = ()
    groups: tuple[Group, ...] = ()

    @property
    def values(self) -> tuple[int, ...]:
        """Raw drawn values in order, suitable for replay."""
        return tuple(value for _, value in self.draws)

    @property
    def total_bits(self) -> int:
        """Total number of bits consumed."""
        return sum(width for width, _ in self.draws)

    def discarded(self) -> tuple[Group, ...]:
        """Groups closed with the discard flag set."""
        return tuple(g for g in self.groups if g.discard)

    def labeled(self, label: str) -> tuple[Group, ...]:
        """Groups carrying the given label."""
        return tuple(g for g in self.groups if g.label == label)

    def roots(self) -> tuple[Group, ...]:
        """Top-level groups in opening order."""
        return tuple(g for g in self.groups if g.is_root())

    def children(self, parent: Group) -> tuple[Group, ...]:
        """Direct children of a group in opening order."""
        return tuple(g for g in self.groups if g.parent == parent.index)

    def __len__(self) -> int:
        """Number of draws."""
        return len(self.draws)
