"""Tests for board module."""

from collections import Counter

import pytest

from monopoly_sim.board import (
    BOARD,
    GO_TO_JAIL_INDEX,
    JAIL_INDEX,
    board_size,
    cell_at,
    index_of,
    indices_of,
)


def test_board_size():
    """Test the board has 40 cells."""
    assert board_size() == 40
    assert len(BOARD) == 40


def test_only_card_cells_repeat():
    """Test only chance and community chest names are duplicated."""
    counts = Counter(BOARD)
    repeated = {name: n for name, n in counts.items() if n > 1}

    assert repeated == {"chance": 3, "community-chest": 3}


def test_index_of_first_occurrence():
    """Test reverse lookup returns the first matching index."""
    assert index_of("go") == 0
    assert index_of("community-chest") == 2
    assert index_of("chance") == 7
    assert index_of("mayfair") == 39


def test_jail_indices():
    """Test jail and go-to-jail positions."""
    assert JAIL_INDEX == 10
    assert GO_TO_JAIL_INDEX == 30
    assert cell_at(JAIL_INDEX) == "jail"
    assert cell_at(GO_TO_JAIL_INDEX) == "go-to-jail"


def test_cell_at_wraps():
    """Test cell lookup is cyclic."""
    assert cell_at(40) == "go"
    assert cell_at(-1) == "mayfair"


def test_indices_of():
    """Test all occurrences are found."""
    assert indices_of("chance") == [7, 22, 36]
    assert indices_of("community-chest") == [2, 17, 33]


def test_index_of_unknown():
    """Test unknown cell names raise KeyError."""
    with pytest.raises(KeyError):
        index_of("boardwalk")
