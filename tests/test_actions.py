"""Unit tests for action objects, legal-action listing and player views."""

import pytest

from unolite.engine import (
    DrawCard,
    DrawOutcome,
    GameState,
    PassTurn,
    PlayCard,
    PlayerView,
    apply_action,
    get_legal_actions,
)


def test_legal_actions_with_playable_card(started_state: GameState) -> None:
    actions = get_legal_actions(started_state, "alice")
    assert actions == [PlayCard(card=started_state.players[0].hand[0])]


def test_legal_actions_without_playable_card(stuck_state: GameState) -> None:
    assert get_legal_actions(stuck_state, "alice") == [DrawCard()]


def test_legal_actions_after_draw(stuck_state: GameState) -> None:
    outcome = apply_action(stuck_state, "alice", DrawCard(), lambda: 0).unwrap()
    assert isinstance(outcome, DrawOutcome)
    actions = get_legal_actions(stuck_state, "alice")
    assert actions == [PlayCard(card=outcome.card), PassTurn()]


def test_legal_actions_for_waiting_player(started_state: GameState) -> None:
    assert get_legal_actions(started_state, "bob") == []


def test_apply_play_and_pass(stuck_state: GameState) -> None:
    apply_action(stuck_state, "alice", DrawCard(), lambda: 0).unwrap()
    state = apply_action(stuck_state, "alice", PassTurn(), lambda: 0).unwrap()
    assert state.turn.active_player_id == "bob"


def test_apply_play_card(started_state: GameState) -> None:
    action = get_legal_actions(started_state, "alice")[0]
    result = apply_action(started_state, "alice", action, lambda: 0)
    assert result.ok
    assert started_state.top_discard() == action.card


def test_apply_unknown_action(started_state: GameState) -> None:
    with pytest.raises(TypeError):
        apply_action(started_state, "alice", "skip", lambda: 0)


def test_player_view_hides_opponent_hand(started_state: GameState) -> None:
    view = PlayerView.from_state(started_state, "bob")
    assert [c.id for c in view.my_hand] == ["b-1"]
    assert view.num_cards_per_player == {"alice": 2, "bob": 1}
    assert view.top_discard.id == "d-1"
    assert view.active_player_id == "alice"
    assert view.has_drawn_card is False

    # A copy: the agent cannot reach into the state
    view.my_hand.clear()
    assert len(started_state.players[1].hand) == 1
