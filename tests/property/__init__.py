"""
Property-based testing suite for bitdraw.

Uses Hypothesis to choose seeds and raw bit buffers, then checks range,
replay and group-structure invariants of the generators.
"""
