"""Metrics and analysis utilities for the Monopoly occupancy simulator.

Functions for turning a visit histogram into per-cell results.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any

import numpy as np

from monopoly_sim.board import BOARD_SIZE, cell_at


@dataclass
class CellResult:
    """Visit statistics for one board cell."""

    index: int
    name: str
    count: int
    percent: float


def _as_counts(histogram: np.ndarray | Mapping[int, int]) -> np.ndarray:
    if isinstance(histogram, Mapping):
        counts = np.zeros(BOARD_SIZE, dtype=np.int64)
        for index, count in histogram.items():
            counts[index] = count
        return counts
    counts = np.asarray(histogram, dtype=np.int64)
    if counts.shape != (BOARD_SIZE,):
        raise ValueError(
            f"Histogram must have shape ({BOARD_SIZE},), got {counts.shape}"
        )
    return counts


def summarize(histogram: np.ndarray | Mapping[int, int]) -> list[CellResult]:
    """Convert raw visit counts into per-cell results.

    An empty histogram (no turns run) reports 0% for every cell.

    Args:
        histogram: Visit counts indexed by cell

    Returns:
        One result per board cell, in board order
    """
    counts = _as_counts(histogram)
    total = int(counts.sum())

    results = []
    for index, count in enumerate(counts):
        percent = 100.0 * int(count) / total if total > 0 else 0.0
        results.append(
            CellResult(
                index=index, name=cell_at(index), count=int(count), percent=percent
            )
        )
    return results


def sort_by_count(results: list[CellResult]) -> list[CellResult]:
    """Most visited cells first; ties keep board order."""
    return sorted(results, key=lambda result: result.count, reverse=True)


def result_rows(results: list[CellResult]) -> list[dict[str, str]]:
    """Table rows for display, percentages to one decimal place."""
    return [
        {
            "Position": str(result.index),
            "Name": result.name,
            "Hits": str(result.count),
            "Percent": f"{result.percent:.1f}%",
        }
        for result in results
    ]


def to_dict(results: list[CellResult]) -> list[dict[str, Any]]:
    """JSON-serialisable records."""
    return [asdict(result) for result in results]
