"""Turn state machine for the Monopoly occupancy simulator.

``tick`` advances one player by exactly one turn. States are immutable;
every step returns a new ``PlayerState``.
"""

from __future__ import annotations

from dataclasses import replace

import numpy as np

from monopoly_sim.board import (
    BOARD_SIZE,
    CHANCE,
    COMMUNITY_CHEST,
    GO_TO_JAIL,
    JAIL_INDEX,
    cell_at,
    index_of,
)
from monopoly_sim.cards import Card, CardType, draw_chance, draw_community_chest
from monopoly_sim.models import JAIL_SENTENCE, MAX_ROLLS, PlayerState
from monopoly_sim.sampling import JAIL, roll_two_dice, roll_with_doubles_budget

INITIAL_STATE = PlayerState()


def advance_position(state: PlayerState, spaces: int) -> PlayerState:
    """Move ``spaces`` cells around the board (negative moves backwards)."""
    return replace(state, position=(state.position + spaces) % BOARD_SIZE)


def go_to_jail(state: PlayerState) -> PlayerState:
    """Send the player to jail for a full sentence."""
    return replace(state, position=JAIL_INDEX, turns_left_in_jail=JAIL_SENTENCE)


def leave_jail(state: PlayerState) -> PlayerState:
    return replace(state, turns_left_in_jail=0)


def use_get_out_of_jail_free_card(state: PlayerState) -> PlayerState:
    return leave_jail(
        replace(state, get_out_of_jail_free_cards=state.get_out_of_jail_free_cards - 1)
    )


def attempt_doubles_escape(state: PlayerState, rng: np.random.Generator) -> PlayerState:
    """Roll once; a double frees the player and moves them by the roll."""
    roll, is_double = roll_two_dice(rng)
    if not is_double:
        return state

    state = advance_position(leave_jail(state), roll)
    return replace(state, rolls_remaining=state.rolls_remaining - 1)


def serve_jail_turn(state: PlayerState, rng: np.random.Generator) -> PlayerState:
    """Spend one turn in jail.

    The sentence is decremented first. Only if the player is still in jail
    afterwards do they play a get-out-of-jail-free card or, lacking one,
    try to roll a double. A sentence that runs out frees the player with
    neither.
    """
    state = replace(state, turns_left_in_jail=state.turns_left_in_jail - 1)
    if state.in_jail and state.has_get_out_of_jail_free_card:
        state = use_get_out_of_jail_free_card(state)
    if state.in_jail:
        state = attempt_doubles_escape(state, rng)
    return state


def roll_dice(state: PlayerState, rng: np.random.Generator) -> PlayerState:
    """Take the turn's rolls; three doubles in a row means jail."""
    roll = roll_with_doubles_budget(rng, state.rolls_remaining)
    if roll is JAIL:
        return go_to_jail(state)
    return advance_position(state, roll)


def apply_card(
    state: PlayerState, card: Card, rng: np.random.Generator
) -> PlayerState:
    """Apply a card effect to the player.

    Advancing to a cell does not trigger that cell's own landing effects.

    Args:
        state: Current player state
        card: Card to apply
        rng: Random number generator, used when the card draws another card

    Returns:
        New player state
    """
    if card.card_type is CardType.ADVANCE:
        return replace(state, position=index_of(card.target))
    if card.card_type is CardType.GO_TO_JAIL:
        return go_to_jail(state)
    if card.card_type is CardType.MOVE_DELTA:
        return advance_position(state, card.delta)
    if card.card_type is CardType.GET_OUT_OF_JAIL_FREE:
        return replace(
            state, get_out_of_jail_free_cards=state.get_out_of_jail_free_cards + 1
        )
    if card.card_type is CardType.TAKE_CHANCE_CARD:
        # The chance deck never holds TAKE_CHANCE_CARD, so this recurses once
        return apply_card(state, draw_chance(rng), rng)
    if card.card_type is CardType.NO_EFFECT:
        return state
    raise ValueError(f"Unknown card type: {card.card_type}")


def resolve_landing(state: PlayerState, rng: np.random.Generator) -> PlayerState:
    """Apply the effect of the cell the player ended their move on."""
    cell = cell_at(state.position)
    if cell == GO_TO_JAIL:
        return go_to_jail(state)
    if cell == CHANCE:
        return apply_card(state, draw_chance(rng), rng)
    if cell == COMMUNITY_CHEST:
        return apply_card(state, draw_community_chest(rng), rng)
    return state


def tick(state: PlayerState, rng: np.random.Generator) -> PlayerState:
    """Play exactly one turn.

    1. Reset the roll budget.
    2. If in jail, serve a jail turn (may free the player).
    3. If free, roll the dice and move (or go to jail on three doubles).
    4. Resolve the landed cell: go-to-jail, chance or community chest.

    Args:
        state: State at the start of the turn
        rng: Random number generator owned by this player

    Returns:
        State at the end of the turn
    """
    state = replace(state, rolls_remaining=MAX_ROLLS)
    if state.in_jail:
        state = serve_jail_turn(state, rng)
    if not state.in_jail:
        state = roll_dice(state, rng)
    return resolve_landing(state, rng)
