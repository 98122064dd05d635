"""Chance and Community Chest cards.

Only cards that move the player or change their jail status are modelled.
Every other card (paying, collecting, repairs) is collapsed into
``NO_EFFECT``. Decks are infinite: each draw is an independent uniform pick
from 16 slots, with replacement.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum

import numpy as np

DECK_SIZE = 16


class CardType(Enum):
    """Types of card effects."""

    ADVANCE = "advance"
    GO_TO_JAIL = "go_to_jail"
    MOVE_DELTA = "move_delta"
    GET_OUT_OF_JAIL_FREE = "get_out_of_jail_free"
    TAKE_CHANCE_CARD = "take_chance_card"
    NO_EFFECT = "no_effect"


@dataclass(frozen=True)
class Card:
    """A drawn card effect.

    ``target`` is set for ``ADVANCE`` only, ``delta`` for ``MOVE_DELTA`` only.
    """

    card_type: CardType
    target: str | None = None
    delta: int = 0

    def __str__(self) -> str:
        if self.card_type is CardType.ADVANCE:
            return f"advance to {self.target}"
        if self.card_type is CardType.MOVE_DELTA:
            return f"move {self.delta:+d}"
        return self.card_type.value.replace("_", " ")


NO_EFFECT = Card(CardType.NO_EFFECT)


def _build_deck(effects: list[Card]) -> tuple[Card, ...]:
    """Pad the modelled effects with no-effect cards up to the deck size."""
    if len(effects) > DECK_SIZE:
        raise ValueError(f"Deck holds at most {DECK_SIZE} cards, got {len(effects)}")
    return tuple(effects) + (NO_EFFECT,) * (DECK_SIZE - len(effects))


CHANCE_DECK: tuple[Card, ...] = _build_deck(
    [
        Card(CardType.ADVANCE, target="mayfair"),
        Card(CardType.ADVANCE, target="go"),
        Card(CardType.GO_TO_JAIL),
        Card(CardType.MOVE_DELTA, delta=-3),
        Card(CardType.GET_OUT_OF_JAIL_FREE),
        Card(CardType.ADVANCE, target="trafalgar-square"),
    ]
)

COMMUNITY_CHEST_DECK: tuple[Card, ...] = _build_deck(
    [
        Card(CardType.GET_OUT_OF_JAIL_FREE),
        Card(CardType.ADVANCE, target="go"),
        Card(CardType.GO_TO_JAIL),
        Card(CardType.TAKE_CHANCE_CARD),
        Card(CardType.ADVANCE, target="old-kent-road"),
    ]
)


def draw(rng: np.random.Generator, deck: tuple[Card, ...]) -> Card:
    """Draw one card uniformly at random, with replacement."""
    return deck[int(rng.integers(0, len(deck)))]


def draw_chance(rng: np.random.Generator) -> Card:
    """Draw a Chance card."""
    return draw(rng, CHANCE_DECK)


def draw_community_chest(rng: np.random.Generator) -> Card:
    """Draw a Community Chest card."""
    return draw(rng, COMMUNITY_CHEST_DECK)


def deck_probabilities(deck: tuple[Card, ...]) -> dict[Card, float]:
    """Designed probability of each distinct card in a deck."""
    counts = Counter(deck)
    return {card: count / len(deck) for card, count in counts.items()}
