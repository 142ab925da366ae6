"""UNO Lite rules: state transitions, legal actions and projections.

Every operation checks its preconditions in order and reports the first one
violated as a failed Result. State is only mutated on success.
"""

import logging
import time
from dataclasses import dataclass
from typing import Dict, List, Union

from unolite.engine.card import Card
from unolite.engine.deck import RandomFn, create_deck, draw_top_card, shuffle
from unolite.engine.game_state import (
    GameState,
    Phase,
    PlayerState,
    PublicGameState,
    PublicPlayerState,
    TurnState,
)
from unolite.engine.result import ErrorCode, Result

logger = logging.getLogger(__name__)

CARDS_PER_PLAYER = 7
MAX_PLAYERS = 2


@dataclass
class PlayCard:
    """Action: play a card from hand."""

    card: Card


@dataclass
class DrawCard:
    """Action: draw a card (only when nothing in hand is playable)."""

    pass


@dataclass
class PassTurn:
    """Action: end the turn after drawing."""

    pass


Action = Union[PlayCard, DrawCard, PassTurn]


@dataclass
class DrawOutcome:
    state: GameState
    card: Card
    is_playable: bool


def _now() -> float:
    return time.time()


def _refresh_timestamp(state: GameState) -> None:
    state.updated_at = _now()


def _next_player_id(state: GameState, current_id: str) -> str:
    order = state.player_order
    if current_id not in order:
        return current_id
    return order[(order.index(current_id) + 1) % len(order)]


def _advance_turn(state: GameState) -> None:
    if state.turn is None:
        return
    state.turn = TurnState(
        active_player_id=_next_player_id(state, state.turn.active_player_id),
        has_drawn_card=False,
    )


def _check_active_turn(state: GameState, player_id: str) -> Result[None]:
    if state.phase != Phase.IN_PROGRESS:
        return Result.failure(ErrorCode.GAME_NOT_READY, "The game has not started.")
    if state.turn is None or state.turn.active_player_id != player_id:
        return Result.failure(ErrorCode.NOT_PLAYER_TURN, "It is the other player's turn.")
    return Result.success(None)


def _player_not_found() -> Result:
    return Result.failure(ErrorCode.PLAYER_NOT_FOUND, "Player is not in this room.")


def _replenish_draw_pile(state: GameState, random: RandomFn) -> Result[None]:
    """Shuffle every discard except the top one back into the draw pile."""
    if len(state.discard_pile) <= 1:
        return Result.failure(ErrorCode.NO_CARDS_TO_DRAW, "No cards left to draw.")

    top = state.discard_pile[-1]
    state.draw_pile = shuffle(state.discard_pile[:-1], random)
    state.discard_pile = [top]
    logger.debug("Room %s: reshuffled %d cards into draw pile", state.room_id, len(state.draw_pile))
    return Result.success(None)


def create_game(room_id: str, host_id: str) -> GameState:
    """Create a game with the host seated, waiting for an opponent."""
    now = _now()
    return GameState(
        room_id=room_id,
        phase=Phase.WAITING_FOR_PLAYER,
        players=[PlayerState(id=host_id)],
        player_order=[host_id],
        draw_pile=[],
        discard_pile=[],
        created_at=now,
        updated_at=now,
    )


def join_game(state: GameState, player_id: str) -> Result[GameState]:
    if state.phase not in (Phase.WAITING_FOR_PLAYER, Phase.READY_TO_START):
        return Result.failure(ErrorCode.GAME_ALREADY_STARTED, "The game has already started.")
    if state.find_player(player_id) is not None:
        return Result.failure(ErrorCode.PLAYER_ALREADY_JOINED, "Player is already in the room.")
    if len(state.players) >= MAX_PLAYERS:
        return Result.failure(ErrorCode.ROOM_FULL, "The room is for two players only.")

    state.players.append(PlayerState(id=player_id))
    state.player_order.append(player_id)
    state.phase = (
        Phase.READY_TO_START if len(state.players) == MAX_PLAYERS else Phase.WAITING_FOR_PLAYER
    )
    _refresh_timestamp(state)
    logger.debug("Room %s: %s joined", state.room_id, player_id)
    return Result.success(state)


def start_game(state: GameState, random: RandomFn) -> Result[GameState]:
    """Shuffle, deal 7 cards each round-robin and flip the first discard."""
    if len(state.players) < MAX_PLAYERS:
        return Result.failure(ErrorCode.NOT_ENOUGH_PLAYERS, "Two players are needed to start.")
    if state.phase in (Phase.IN_PROGRESS, Phase.FINISHED):
        return Result.failure(ErrorCode.GAME_ALREADY_STARTED, "The game has already started.")

    deck = shuffle(create_deck(), random)
    hands: Dict[str, List[Card]] = {pid: [] for pid in state.player_order}
    for _ in range(CARDS_PER_PLAYER):
        for pid in state.player_order:
            card = draw_top_card(deck)
            if card is None:
                return Result.failure(ErrorCode.DRAW_PILE_EMPTY, "Not enough cards to deal.")
            hands[pid].append(card)

    first_discard = draw_top_card(deck)
    if first_discard is None:
        return Result.failure(ErrorCode.DRAW_PILE_EMPTY, "No card left for the discard pile.")

    for player in state.players:
        player.hand = hands[player.id]
    state.draw_pile = deck
    state.discard_pile = [first_discard]
    state.current_color = first_discard.color
    state.current_value = first_discard.value
    state.phase = Phase.IN_PROGRESS
    state.winner_id = None
    state.turn = TurnState(active_player_id=state.player_order[0], has_drawn_card=False)
    _refresh_timestamp(state)
    logger.debug("Room %s: started, first discard %s", state.room_id, first_discard)
    return Result.success(state)


def list_playable_cards(state: GameState, player_id: str) -> Result[List[Card]]:
    """Cards in the player's hand matching the current color or value."""
    if state.current_color is None or state.current_value is None:
        return Result.failure(ErrorCode.GAME_NOT_READY, "The game has not started.")
    player = state.find_player(player_id)
    if player is None:
        return _player_not_found()
    return Result.success(
        [c for c in player.hand if c.matches(state.current_color, state.current_value)]
    )


def play_card(state: GameState, player_id: str, card_id: str) -> Result[GameState]:
    check = _check_active_turn(state, player_id)
    if not check.ok:
        return check  # type: ignore[return-value]

    player = state.find_player(player_id)
    if player is None:
        return _player_not_found()

    card = next((c for c in player.hand if c.id == card_id), None)
    if card is None:
        return Result.failure(ErrorCode.CARD_NOT_FOUND, "That card is not in your hand.")
    if not card.matches(state.current_color, state.current_value):
        return Result.failure(ErrorCode.CARD_NOT_PLAYABLE, "That card cannot be played now.")

    player.hand.remove(card)
    state.discard_pile.append(card)
    state.current_color = card.color
    state.current_value = card.value

    if not player.hand:
        state.phase = Phase.FINISHED
        state.winner_id = player_id
        state.turn = None
        logger.debug("Room %s: %s played %s and won", state.room_id, player_id, card)
    else:
        _advance_turn(state)
        logger.debug("Room %s: %s played %s", state.room_id, player_id, card)

    _refresh_timestamp(state)
    return Result.success(state)


def draw_card(state: GameState, player_id: str, random: RandomFn) -> Result[DrawOutcome]:
    """Draw one card when nothing in hand is playable. The turn does not pass."""
    check = _check_active_turn(state, player_id)
    if not check.ok:
        return check  # type: ignore[return-value]
    if state.turn is None:
        return Result.failure(ErrorCode.GAME_NOT_READY, "Turn state is missing.")
    if state.turn.has_drawn_card:
        return Result.failure(ErrorCode.ALREADY_DREW_CARD, "Only one card may be drawn per turn.")

    playable = list_playable_cards(state, player_id)
    if not playable.ok:
        return playable  # type: ignore[return-value]
    if playable.value:
        return Result.failure(ErrorCode.MUST_DRAW_FIRST, "You have a playable card; play it.")

    player = state.find_player(player_id)
    if player is None:
        return _player_not_found()

    if not state.draw_pile:
        replenished = _replenish_draw_pile(state, random)
        if not replenished.ok:
            return replenished  # type: ignore[return-value]

    card = draw_top_card(state.draw_pile)
    if card is None:
        return Result.failure(ErrorCode.DRAW_PILE_EMPTY, "Cannot draw from the draw pile.")

    player.hand.append(card)
    state.turn.has_drawn_card = True
    _refresh_timestamp(state)
    logger.debug("Room %s: %s drew a card", state.room_id, player_id)
    return Result.success(
        DrawOutcome(
            state=state,
            card=card,
            is_playable=card.matches(state.current_color, state.current_value),
        )
    )


def pass_turn(state: GameState, player_id: str) -> Result[GameState]:
    check = _check_active_turn(state, player_id)
    if not check.ok:
        return check  # type: ignore[return-value]
    if state.turn is None or not state.turn.has_drawn_card:
        return Result.failure(ErrorCode.MUST_DRAW_FIRST, "Draw a card before passing.")

    _advance_turn(state)
    _refresh_timestamp(state)
    logger.debug("Room %s: %s passed", state.room_id, player_id)
    return Result.success(state)


def get_legal_actions(state: GameState, player_id: str) -> List[Action]:
    """Return all legal actions for the player (empty if it is not their turn)."""
    if state.phase != Phase.IN_PROGRESS or state.turn is None:
        return []
    if state.turn.active_player_id != player_id:
        return []

    playable = list_playable_cards(state, player_id)
    if not playable.ok:
        return []

    actions: List[Action] = [PlayCard(card=c) for c in playable.value]
    if state.turn.has_drawn_card:
        actions.append(PassTurn())
    elif not actions:
        actions.append(DrawCard())
    return actions


def apply_action(
    state: GameState,
    player_id: str,
    action: Action,
    random: RandomFn,
) -> Result:
    """Dispatch an action object to the matching rules function."""
    if isinstance(action, PlayCard):
        return play_card(state, player_id, action.card.id)
    if isinstance(action, DrawCard):
        return draw_card(state, player_id, random)
    if isinstance(action, PassTurn):
        return pass_turn(state, player_id)
    raise TypeError(f"Unknown action: {action!r}")


def get_public_state(state: GameState) -> PublicGameState:
    return PublicGameState(
        room_id=state.room_id,
        phase=state.phase,
        current_color=state.current_color,
        current_value=state.current_value,
        active_player_id=state.turn.active_player_id if state.turn else None,
        players=[PublicPlayerState(id=p.id, cards_count=len(p.hand)) for p in state.players],
        top_discard=state.top_discard(),
        winner_id=state.winner_id,
    )


def get_player_hand(state: GameState, player_id: str) -> Result[List[Card]]:
    player = state.find_player(player_id)
    if player is None:
        return _player_not_found()
    return Result.success(list(player.hand))
