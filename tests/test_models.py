"""Tests for models module."""

import pytest

from monopoly_sim.models import PlayerState, SimulationConfig


def test_player_state_defaults():
    """Test the initial player configuration."""
    state = PlayerState()

    assert state.position == 0
    assert state.rolls_remaining == 3
    assert state.get_out_of_jail_free_cards == 0
    assert state.turns_left_in_jail == 0
    assert not state.in_jail


def test_player_state_in_jail():
    """Test jail and card flags."""
    state = PlayerState(position=10, turns_left_in_jail=2, get_out_of_jail_free_cards=1)

    assert state.in_jail
    assert state.has_get_out_of_jail_free_card


@pytest.mark.parametrize(
    "kwargs, message",
    [
        ({"position": 40}, "Position"),
        ({"position": -1}, "Position"),
        ({"rolls_remaining": 4}, "Rolls remaining"),
        ({"rolls_remaining": -1}, "Rolls remaining"),
        ({"get_out_of_jail_free_cards": -1}, "cannot be negative"),
        ({"turns_left_in_jail": 4}, "Turns left in jail"),
    ],
)
def test_player_state_invalid(kwargs, message):
    """Test out-of-range fields are rejected."""
    with pytest.raises(ValueError, match=message):
        PlayerState(**kwargs)


def test_player_state_is_immutable():
    """Test states cannot be mutated in place."""
    state = PlayerState()

    with pytest.raises(AttributeError):
        state.position = 5


def test_simulation_config_defaults():
    """Test default configuration."""
    config = SimulationConfig()

    assert config.turns_per_worker == 30
    assert config.worker_count == 20
    assert config.seed is None
    assert config.total_turns == 600
    assert config.thread_count == 20


def test_simulation_config_invalid():
    """Test non-positive counts are rejected."""
    with pytest.raises(ValueError, match="Turns per worker must be positive"):
        SimulationConfig(turns_per_worker=0)
    with pytest.raises(ValueError, match="Worker count must be positive"):
        SimulationConfig(worker_count=0)
    with pytest.raises(ValueError, match="Max threads must be positive"):
        SimulationConfig(max_threads=0)


def test_simulation_config_thread_count():
    """Test thread count is capped by workers and max threads."""
    assert SimulationConfig(worker_count=4, max_threads=8).thread_count == 4
    assert SimulationConfig(worker_count=10, max_threads=2).thread_count == 2
    assert SimulationConfig(worker_count=100).thread_count == 32
