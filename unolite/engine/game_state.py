"""Game state for UNO Lite."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from unolite.engine.card import Card, Color


class Phase(str, Enum):
    """Lifecycle of a match. Only ever moves forward."""

    WAITING_FOR_PLAYER = "waiting-for-player"
    READY_TO_START = "ready-to-start"
    IN_PROGRESS = "in-progress"
    FINISHED = "finished"


@dataclass
class PlayerState:
    id: str
    hand: List[Card] = field(default_factory=list)


@dataclass
class TurnState:
    active_player_id: str
    has_drawn_card: bool = False


@dataclass
class GameState:
    """Mutable UNO Lite game state. Rules functions update it in place."""

    room_id: str
    phase: Phase
    players: List[PlayerState]
    player_order: List[str]
    draw_pile: List[Card]  # top is last
    discard_pile: List[Card]  # top is last
    created_at: float
    updated_at: float
    current_color: Optional[Color] = None
    current_value: Optional[int] = None
    turn: Optional[TurnState] = None
    winner_id: Optional[str] = None

    def top_discard(self) -> Optional[Card]:
        """Return the top card on the discard pile."""
        return self.discard_pile[-1] if self.discard_pile else None

    def find_player(self, player_id: str) -> Optional[PlayerState]:
        return next((p for p in self.players if p.id == player_id), None)

    def total_cards(self) -> int:
        """Cards across every hand and both piles."""
        in_hands = sum(len(p.hand) for p in self.players)
        return in_hands + len(self.draw_pile) + len(self.discard_pile)


@dataclass(frozen=True)
class PublicPlayerState:
    id: str
    cards_count: int


@dataclass(frozen=True)
class PublicGameState:
    """What anyone at the table, opponent included, is allowed to see."""

    room_id: str
    phase: Phase
    current_color: Optional[Color]
    current_value: Optional[int]
    active_player_id: Optional[str]
    players: List[PublicPlayerState]
    top_discard: Optional[Card]
    winner_id: Optional[str]


@dataclass
class PlayerView:
    """Filtered game state visible to a single player.

    Contains only that player's hand and public info.
    """

    my_hand: List[Card]
    top_discard: Optional[Card]
    current_color: Optional[Color]
    current_value: Optional[int]
    active_player_id: Optional[str]
    has_drawn_card: bool
    phase: Phase
    winner_id: Optional[str]
    player_order: List[str]
    num_cards_per_player: Dict[str, int]  # player_id -> count

    @classmethod
    def from_state(cls, state: GameState, player_id: str) -> "PlayerView":
        """Create a player view from full game state, hiding other players' hands."""
        player = state.find_player(player_id)
        return cls(
            my_hand=list(player.hand) if player else [],
            top_discard=state.top_discard(),
            current_color=state.current_color,
            current_value=state.current_value,
            active_player_id=state.turn.active_player_id if state.turn else None,
            has_drawn_card=state.turn.has_drawn_card if state.turn else False,
            phase=state.phase,
            winner_id=state.winner_id,
            player_order=list(state.player_order),
            num_cards_per_player={p.id: len(p.hand) for p in state.players},
        )
