"""Game engine for UNO Lite."""

from unolite.engine.card import Card, Color
from unolite.engine.deck import RandomFn, create_deck, draw_top_card, shuffle
from unolite.engine.game_state import (
    GameState,
    Phase,
    PlayerState,
    PlayerView,
    PublicGameState,
    PublicPlayerState,
    TurnState,
)
from unolite.engine.result import ErrorCode, GameError, GameRuleError, Result
from unolite.engine.rules import (
    Action,
    DrawCard,
    DrawOutcome,
    PassTurn,
    PlayCard,
    apply_action,
    create_game,
    draw_card,
    get_legal_actions,
    get_player_hand,
    get_public_state,
    join_game,
    list_playable_cards,
    pass_turn,
    play_card,
    start_game,
)

__all__ = [
    "Card",
    "Color",
    "RandomFn",
    "create_deck",
    "draw_top_card",
    "shuffle",
    "GameState",
    "Phase",
    "PlayerState",
    "PlayerView",
    "PublicGameState",
    "PublicPlayerState",
    "TurnState",
    "ErrorCode",
    "GameError",
    "GameRuleError",
    "Result",
    "Action",
    "DrawCard",
    "DrawOutcome",
    "PassTurn",
    "PlayCard",
    "apply_action",
    "create_game",
    "draw_card",
    "get_legal_actions",
    "get_player_hand",
    "get_public_state",
    "join_game",
    "list_playable_cards",
    "pass_turn",
    "play_card",
    "start_game",
]
