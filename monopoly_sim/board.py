"""Board model for the Monopoly occupancy simulator.

The board is a fixed, cyclic sequence of 40 named cells (London edition).
"""

from __future__ import annotations

BOARD: tuple[str, ...] = (
    "go",
    "old-kent-road",
    "community-chest",
    "whitechapel-road",
    "income-tax",
    "kings-cross-station",
    "the-angel-islington",
    "chance",
    "euston-road",
    "pentonville-road",
    "jail",
    "pall-mall",
    "electric-company",
    "whitehall",
    "northumberland-avenue",
    "waterloo-station",
    "bow-street",
    "community-chest",
    "marlborough-street",
    "vine-street",
    "free-parking",
    "strand",
    "chance",
    "fleet-street",
    "trafalgar-square",
    "fenchurch-st-station",
    "leicester-square",
    "coventry-street",
    "water-works",
    "piccadilly",
    "go-to-jail",
    "oxford-street",
    "regent-street",
    "community-chest",
    "bond-street",
    "liverpool-st-station",
    "chance",
    "park-lane",
    "super-tax",
    "mayfair",
)

BOARD_SIZE: int = len(BOARD)

CHANCE = "chance"
COMMUNITY_CHEST = "community-chest"
GO_TO_JAIL = "go-to-jail"

# Duplicated names map to their first occurrence
_NAME_TO_INDEX: dict[str, int] = {}
for _index, _name in enumerate(BOARD):
    _NAME_TO_INDEX.setdefault(_name, _index)

JAIL_INDEX: int = _NAME_TO_INDEX["jail"]
GO_TO_JAIL_INDEX: int = _NAME_TO_INDEX[GO_TO_JAIL]


def board_size() -> int:
    """Number of cells on the board."""
    return BOARD_SIZE


def cell_at(index: int) -> str:
    """Name of the cell at ``index`` (wraps around the board)."""
    return BOARD[index % BOARD_SIZE]


def index_of(name: str) -> int:
    """Index of the first cell called ``name``.

    Raises:
        KeyError: If no cell has that name
    """
    return _NAME_TO_INDEX[name]


def indices_of(name: str) -> list[int]:
    """All indices of cells called ``name``."""
    return [i for i, cell in enumerate(BOARD) if cell == name]
