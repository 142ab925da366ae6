"""Shared fixtures: a hand-built game in progress."""

import pytest

from unolite.engine import Card, Color, GameState, Phase, PlayerState, TurnState


def card(card_id: str, color: Color, value: int) -> Card:
    return Card(id=card_id, color=color, value=value)


@pytest.fixture
def started_state() -> GameState:
    """alice to move on a red 5, holding a red 3 and a green 1."""
    return GameState(
        room_id="room-1",
        phase=Phase.IN_PROGRESS,
        players=[
            PlayerState(id="alice", hand=[card("a-1", Color.RED, 3), card("a-2", Color.GREEN, 1)]),
            PlayerState(id="bob", hand=[card("b-1", Color.YELLOW, 9)]),
        ],
        player_order=["alice", "bob"],
        draw_pile=[card("deck-1", Color.BLUE, 5), card("deck-2", Color.RED, 7)],
        discard_pile=[
            card("d-aux-1", Color.YELLOW, 8),
            card("d-aux-2", Color.BLUE, 2),
            card("d-1", Color.RED, 5),
        ],
        created_at=1000.0,
        updated_at=1000.0,
        current_color=Color.RED,
        current_value=5,
        turn=TurnState(active_player_id="alice", has_drawn_card=False),
    )


@pytest.fixture
def stuck_state(started_state: GameState) -> GameState:
    """Same table, but alice holds nothing that matches the red 5."""
    started_state.players[0].hand = [card("a-2", Color.GREEN, 1), card("a-3", Color.BLUE, 2)]
    return started_state
