"""Data models for the Monopoly occupancy simulator.

Contains the per-player state and the simulation configuration, both with
basic validation.
"""

from __future__ import annotations

from dataclasses import dataclass

from monopoly_sim.board import BOARD_SIZE

MAX_ROLLS = 3
JAIL_SENTENCE = 3
DEFAULT_TURNS = 30
DEFAULT_WORKERS = 20
MAX_DEFAULT_THREADS = 32


@dataclass(frozen=True)
class PlayerState:
    """State of a single simulated player between turns."""

    position: int = 0
    rolls_remaining: int = MAX_ROLLS
    get_out_of_jail_free_cards: int = 0
    turns_left_in_jail: int = 0

    def __post_init__(self) -> None:
        """Validate field ranges."""
        if not 0 <= self.position < BOARD_SIZE:
            raise ValueError(
                f"Position must be in [0, {BOARD_SIZE}), got {self.position}"
            )
        if not 0 <= self.rolls_remaining <= MAX_ROLLS:
            raise ValueError(
                f"Rolls remaining must be in [0, {MAX_ROLLS}], "
                f"got {self.rolls_remaining}"
            )
        if self.get_out_of_jail_free_cards < 0:
            raise ValueError("Get out of jail free cards cannot be negative")
        if not 0 <= self.turns_left_in_jail <= JAIL_SENTENCE:
            raise ValueError(
                f"Turns left in jail must be in [0, {JAIL_SENTENCE}], "
                f"got {self.turns_left_in_jail}"
            )

    @property
    def in_jail(self) -> bool:
        return self.turns_left_in_jail > 0

    @property
    def has_get_out_of_jail_free_card(self) -> bool:
        return self.get_out_of_jail_free_cards > 0


@dataclass(frozen=True)
class SimulationConfig:
    """Configuration for a simulation run."""

    turns_per_worker: int = DEFAULT_TURNS
    worker_count: int = DEFAULT_WORKERS
    seed: int | None = None
    max_threads: int | None = None

    def __post_init__(self) -> None:
        """Validate counts."""
        if self.turns_per_worker < 1:
            raise ValueError(
                f"Turns per worker must be positive, got {self.turns_per_worker}"
            )
        if self.worker_count < 1:
            raise ValueError(f"Worker count must be positive, got {self.worker_count}")
        if self.max_threads is not None and self.max_threads < 1:
            raise ValueError(f"Max threads must be positive, got {self.max_threads}")

    @property
    def total_turns(self) -> int:
        return self.turns_per_worker * self.worker_count

    @property
    def thread_count(self) -> int:
        """Threads to use; defaults to one per worker, capped."""
        if self.max_threads is not None:
            return min(self.max_threads, self.worker_count)
        return min(self.worker_count, MAX_DEFAULT_THREADS)
