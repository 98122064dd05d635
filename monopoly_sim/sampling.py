"""Sampling utilities for the Monopoly occupancy simulator.

Centralized, reproducible randomness and dice primitives.
"""

from __future__ import annotations

from enum import Enum

import numpy as np

DIE_FACES = 6


class RollOutcome(Enum):
    """Non-numeric outcome of a turn's dice rolling."""

    JAIL = "jail"


# Three consecutive doubles in one turn
JAIL = RollOutcome.JAIL


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Create a seeded random number generator.

    Args:
        seed: Random seed. If None, uses system entropy.

    Returns:
        NumPy Generator instance
    """
    return np.random.default_rng(seed)


def spawn_rngs(seed: int | None, n: int) -> list[np.random.Generator]:
    """Create ``n`` independent generators from a single seed.

    Each simulated player gets its own stream, so no generator state is
    ever shared between threads and a seeded run is reproducible however
    the workers are scheduled.

    Args:
        seed: Root seed. If None, uses system entropy.
        n: Number of generators to create

    Returns:
        List of NumPy Generator instances
    """
    if n < 0:
        raise ValueError("Cannot spawn a negative number of generators")

    children = np.random.SeedSequence(seed).spawn(n)
    return [np.random.default_rng(child) for child in children]


def roll_die(rng: np.random.Generator) -> int:
    """Roll a single fair six-sided die."""
    return int(rng.integers(1, DIE_FACES + 1))


def roll_two_dice(rng: np.random.Generator) -> tuple[int, bool]:
    """Roll two dice.

    Returns:
        Tuple of (total, is_double)
    """
    first = roll_die(rng)
    second = roll_die(rng)
    return first + second, first == second


def roll_with_doubles_budget(
    rng: np.random.Generator, max_rolls: int
) -> int | RollOutcome:
    """Roll for a turn, re-rolling on doubles.

    Doubles are added to the running total and grant another roll, up to
    ``max_rolls`` rolls in all. Rolling doubles on the last allowed roll
    sends the player to jail.

    Args:
        rng: Random number generator
        max_rolls: Number of rolls allowed this turn

    Returns:
        Total spaces to move, or ``JAIL``
    """
    rolls_left = max_rolls
    total = 0
    while rolls_left > 0:
        roll, is_double = roll_two_dice(rng)
        total += roll
        if not is_double:
            return total
        rolls_left -= 1
    return JAIL
