"""Simulation engine for the Monopoly occupancy simulator.

Each worker plays one independent player for a fixed number of turns and
folds the cells it visits into a private histogram. Workers run on a
thread pool; their histograms are summed once all of them have finished,
so no state is shared between threads.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, Iterable, Iterator

import numpy as np

from monopoly_sim.board import BOARD_SIZE
from monopoly_sim.models import PlayerState, SimulationConfig
from monopoly_sim.sampling import spawn_rngs
from monopoly_sim.turn import INITIAL_STATE, tick

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]


def iter_states(
    turn_count: int,
    rng: np.random.Generator,
    initial_state: PlayerState = INITIAL_STATE,
) -> Iterator[PlayerState]:
    """Lazily yield the state after each of ``turn_count`` turns."""
    state = initial_state
    for _ in range(turn_count):
        state = tick(state, rng)
        yield state


def run_worker(turn_count: int, rng: np.random.Generator) -> Iterator[int]:
    """Lazily yield the cell occupied after each turn of one player."""
    for state in iter_states(turn_count, rng):
        yield state.position


def empty_histogram() -> np.ndarray:
    """Zero count for every cell on the board."""
    return np.zeros(BOARD_SIZE, dtype=np.int64)


def aggregate(positions: Iterable[int]) -> np.ndarray:
    """Fold a stream of visited cells into a count-per-cell histogram.

    Args:
        positions: Cell indices, in any order

    Returns:
        Array of shape (BOARD_SIZE,) with visit counts
    """
    histogram = empty_histogram()
    for position in positions:
        histogram[position] += 1
    return histogram


def merge_histograms(histograms: Iterable[np.ndarray]) -> np.ndarray:
    """Sum histograms cell by cell."""
    merged = empty_histogram()
    for histogram in histograms:
        merged += histogram
    return merged


def worker_histogram(turn_count: int, rng: np.random.Generator) -> np.ndarray:
    """Run one player and return its private histogram."""
    return aggregate(run_worker(turn_count, rng))


def run_config(
    config: SimulationConfig, progress_cb: ProgressCallback | None = None
) -> np.ndarray:
    """Run a full simulation described by ``config``.

    Args:
        config: Simulation configuration
        progress_cb: Called with (completed_workers, worker_count) as
            each worker finishes

    Returns:
        Array of shape (BOARD_SIZE,) with visit counts across all workers
    """
    rngs = spawn_rngs(config.seed, config.worker_count)
    histograms: list[np.ndarray] = []

    logger.info(
        "Starting %d workers x %d turns on %d threads",
        config.worker_count,
        config.turns_per_worker,
        config.thread_count,
    )

    with ThreadPoolExecutor(max_workers=config.thread_count) as executor:
        futures = [
            executor.submit(worker_histogram, config.turns_per_worker, rng)
            for rng in rngs
        ]
        for completed, future in enumerate(as_completed(futures), start=1):
            histograms.append(future.result())
            logger.debug("Worker %d/%d finished", completed, config.worker_count)
            if progress_cb:
                progress_cb(completed, config.worker_count)

    histogram = merge_histograms(histograms)

    total = int(histogram.sum())
    if total != config.total_turns:
        raise RuntimeError(
            f"Histogram holds {total} visits, expected {config.total_turns}"
        )

    logger.info("Simulation finished: %d turns recorded", total)
    return histogram


def run_simulation(
    turns_per_worker: int,
    worker_count: int,
    seed: int | None = None,
    max_threads: int | None = None,
    progress_cb: ProgressCallback | None = None,
) -> np.ndarray:
    """Run ``worker_count`` independent players for ``turns_per_worker`` turns.

    Raises:
        ValueError: If either count is not positive
    """
    config = SimulationConfig(
        turns_per_worker=turns_per_worker,
        worker_count=worker_count,
        seed=seed,
        max_threads=max_threads,
    )
    return run_config(config, progress_cb)
