"""Shared test fixtures for the Monopoly occupancy simulator."""

import pytest


class ScriptedRng:
    """Stand-in for a NumPy Generator that returns preset values.

    Dice consume values in 1..6 (one per die), card draws consume a deck
    slot index in 0..15.
    """

    def __init__(self, values):
        self.values = list(values)

    def integers(self, low, high):
        if not self.values:
            raise AssertionError("Scripted rng ran out of values")
        value = self.values.pop(0)
        assert low <= value < high, f"{value} not in [{low}, {high})"
        return value

    @property
    def exhausted(self):
        return not self.values


@pytest.fixture
def scripted_rng():
    """Factory for scripted generators."""
    return ScriptedRng
