"""
Property-based tests for bit sources.

A state machine drives random open/draw/close sequences against a
RandomBitSource and checks the recorded groups against a model stack.
"""

from hypothesis import given
from hypothesis import strategies as st
from hypothesis.stateful import RuleBasedStateMachine, initialize, invariant, precondition, rule

from bitdraw.core.source import RandomBitSource, ReplayBitSource


class GroupProtocolStateMachine(RuleBasedStateMachine):
    """Stateful testing for the group stack discipline."""

    @initialize(seed=st.integers(min_value=0, max_value=2**32 - 1))
    def setup(self, seed):
        """Initialize state machine."""
        self.source = RandomBitSource(seed)
        self.stack = []
        self.draws = 0

    @rule(label=st.sampled_from(["try", "uint", "floatexp"]), forced=st.booleans())
    def open_group(self, label, forced):
        """Open a group and remember where it started."""
        gid = self.source.begin_group(label, forced)
        self.stack.append((gid, label, forced, self.draws))

    @rule(n=st.integers(min_value=0, max_value=64))
    def draw(self, n):
        """Draw bits and track non-empty draws."""
        value = self.source.draw_bits(n)
        assert 0 <= value < 2**n
        if n > 0:
            self.draws += 1

    @precondition(lambda self: self.stack)
    @rule(discard=st.booleans())
    def close_group(self, discard):
        """Close the innermost group and check its record."""
        gid, label, forced, begin = self.stack.pop()
        self.source.end_group(gid, discard)

        closed = [g for g in self.source.trace().groups if g.index == gid]
        assert len(closed) == 1
        g = closed[0]
        assert (g.label, g.forced, g.discard) == (label, forced, discard)
        assert (g.begin, g.end) == (begin, self.draws)
        assert g.depth == len(self.stack)
        assert g.parent == (self.stack[-1][0] if self.stack else None)

    @invariant()
    def counts_match(self):
        """Open groups and draws match the model."""
        assert self.source.open_groups == len(self.stack)
        assert self.source.draw_count == self.draws

    @invariant()
    def children_nest_inside_parents(self):
        """Closed children lie within their closed parents."""
        trace = self.source.trace()
        for parent in trace.groups:
            for child in trace.children(parent):
                assert parent.begin <= child.begin <= child.end <= parent.end


TestGroupProtocolStateMachine = GroupProtocolStateMachine.TestCase


class TestReplayProperties:
    """Property tests for replay."""

    @given(
        st.lists(
            st.tuples(st.integers(min_value=1, max_value=64), st.integers(min_value=0)),
            max_size=30,
        )
    )
    def test_replay_masks_to_width(self, requests):
        """Test replayed values are the recorded values masked to the width."""
        source = ReplayBitSource([value for _, value in requests])
        for width, value in requests:
            assert source.draw_bits(width) == value & ((1 << width) - 1)
        assert source.remaining == 0
