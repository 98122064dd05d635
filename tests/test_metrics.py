"""Tests for metrics module."""

import numpy as np
import pytest

from monopoly_sim.metrics import (
    CellResult,
    result_rows,
    sort_by_count,
    summarize,
    to_dict,
)
from monopoly_sim.simulator import aggregate, run_simulation


def test_summarize_basic():
    """Test counts and percentages per cell."""
    results = summarize(aggregate([0, 0, 10, 39]))

    assert len(results) == 40
    assert results[0] == CellResult(index=0, name="go", count=2, percent=50.0)
    assert results[10].name == "jail"
    assert results[10].percent == 25.0
    assert results[5].count == 0
    assert results[5].percent == 0.0


def test_summarize_percentages_sum_to_100():
    """Test percentages sum to 100 for a real run."""
    results = summarize(run_simulation(50, 4, seed=3))

    assert sum(r.percent for r in results) == pytest.approx(100.0)
    assert sum(r.count for r in results) == 200


def test_summarize_empty_histogram():
    """Test an empty histogram reports 0% everywhere."""
    results = summarize(np.zeros(40, dtype=int))

    assert all(r.percent == 0.0 for r in results)
    assert all(r.count == 0 for r in results)


def test_summarize_mapping():
    """Test a mapping of cell index to count is accepted."""
    results = summarize({7: 3, 22: 1})

    assert results[7].count == 3
    assert results[7].percent == 75.0
    assert results[0].count == 0


def test_summarize_wrong_shape():
    """Test histograms of the wrong size are rejected."""
    with pytest.raises(ValueError, match="Histogram must have shape"):
        summarize(np.zeros(10))


def test_sort_by_count():
    """Test most visited first, ties in board order."""
    results = sort_by_count(summarize(aggregate([3, 3, 1, 2])))

    assert [r.index for r in results[:3]] == [3, 1, 2]
    assert results[0].count == 2


def test_result_rows():
    """Test table rows use one decimal place."""
    rows = result_rows(summarize(aggregate([0, 0, 1])))

    assert rows[0] == {"Position": "0", "Name": "go", "Hits": "2", "Percent": "66.7%"}
    assert rows[1]["Percent"] == "33.3%"
    assert rows[2]["Percent"] == "0.0%"


def test_to_dict():
    """Test JSON records carry every field."""
    records = to_dict(summarize(aggregate([5])))

    assert records[5] == {
        "index": 5,
        "name": "kings-cross-station",
        "count": 1,
        "percent": 100.0,
    }
