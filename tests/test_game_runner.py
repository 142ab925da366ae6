"""Tests for the game runner and tournament using random agents."""

import random

import pytest

from unolite.agents.random_agent import RandomAgent
from unolite.engine import (
    Phase,
    apply_action,
    create_game,
    get_legal_actions,
    join_game,
    start_game,
)
from unolite.orchestration import GameRunner, run_tournament

PHASE_ORDER = [Phase.WAITING_FOR_PLAYER, Phase.READY_TO_START, Phase.IN_PROGRESS, Phase.FINISHED]


@pytest.mark.parametrize("seed", [1, 7, 42])
def test_invariants_hold_through_random_game(seed: int) -> None:
    rng = random.Random(seed)
    state = create_game("R", "p1")
    join_game(state, "p2").unwrap()
    start_game(state, rng.random).unwrap()

    phase_index = PHASE_ORDER.index(state.phase)
    for _ in range(500):
        if state.phase == Phase.FINISHED:
            break
        pid = state.turn.active_player_id
        action = rng.choice(get_legal_actions(state, pid))
        result = apply_action(state, pid, action, rng.random)
        if not result.ok:
            break

        assert state.total_cards() == 76
        top = state.top_discard()
        assert (state.current_color, state.current_value) == (top.color, top.value)
        assert PHASE_ORDER.index(state.phase) >= phase_index
        phase_index = PHASE_ORDER.index(state.phase)

    if state.phase == Phase.FINISHED:
        assert state.turn is None
        assert state.find_player(state.winner_id).hand == []


def test_runner_plays_a_game() -> None:
    agents = {"p1": RandomAgent("a", seed=1), "p2": RandomAgent("b", seed=2)}
    result = GameRunner(agents, seed=3).run()

    assert result.player_ids == ("p1", "p2")
    assert result.num_turns > 0
    assert result.state.total_cards() == 76
    if result.winner is not None:
        assert result.state.phase == Phase.FINISHED
        assert result.state.find_player(result.winner).hand == []


def test_runner_is_reproducible() -> None:
    def run():
        agents = {"p1": RandomAgent("a", seed=1), "p2": RandomAgent("b", seed=2)}
        return GameRunner(agents, seed=99).run()

    r1, r2 = run(), run()
    assert (r1.winner, r1.num_turns) == (r2.winner, r2.num_turns)


def test_runner_replaces_illegal_choice() -> None:
    class Stubborn:
        name = "stubborn"

        def get_action(self, player_view, legal_actions, player_id):
            return "nonsense"

    result = GameRunner({"p1": Stubborn(), "p2": Stubborn()}, seed=5, max_turns=20).run()
    assert result.num_turns <= 20
    assert result.state.total_cards() == 76


def test_runner_respects_max_turns() -> None:
    agents = {"p1": RandomAgent(seed=1), "p2": RandomAgent(seed=2)}
    result = GameRunner(agents, seed=3, max_turns=3).run()
    assert result.num_turns <= 3


def test_runner_needs_two_agents() -> None:
    with pytest.raises(ValueError):
        GameRunner({"p1": RandomAgent()})


def test_tournament() -> None:
    agents = {"p1": RandomAgent(seed=1), "p2": RandomAgent(seed=2)}
    wins = run_tournament(agents, num_games=4, seed=0)
    assert set(wins) <= {"p1", "p2"}
    assert sum(wins.values()) <= 4
