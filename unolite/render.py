"""Plain-text rendering of cards, hands and the public table."""

from typing import Iterable, List, Optional

from unolite.engine import (
    Action,
    Card,
    Color,
    DrawCard,
    GameState,
    PassTurn,
    Phase,
    get_public_state,
)
from unolite.rooms import RoomPlayer

COLOR_EMOJI = {
    Color.RED: "🔴",
    Color.GREEN: "🟢",
    Color.BLUE: "🔵",
    Color.YELLOW: "🟡",
}


def format_card(card: Card) -> str:
    return f"{COLOR_EMOJI[card.color]}{card.value}"


def format_hand(hand: List[Card]) -> str:
    if not hand:
        return "You have no cards."
    return "\n".join(f"{i}. {format_card(c)} · id={c.id}" for i, c in enumerate(hand, start=1))


def format_player_label(player: RoomPlayer) -> str:
    return f"@{player.username}" if player.username else player.display_name


def _display_name(player_id: str, players: Iterable[RoomPlayer]) -> str:
    match: Optional[RoomPlayer] = next((p for p in players if p.id == player_id), None)
    return match.display_name if match else player_id


def format_public_state(game: GameState, players: Iterable[RoomPlayer] = ()) -> str:
    """Describe the table using only the public projection."""
    players = list(players)
    public = get_public_state(game)
    lines = [f"Room {public.room_id}"]

    if public.top_discard is not None:
        lines.append(f"Top card: {format_card(public.top_discard)}")
    if public.phase == Phase.FINISHED and public.winner_id:
        lines.append(f"🏆 Winner: {_display_name(public.winner_id, players)}")
    else:
        active = _display_name(public.active_player_id, players) if public.active_player_id else "-"
        lines.append(f"Turn: {active}")

    lines.append("Cards in hand:")
    for p in public.players:
        lines.append(f"• {_display_name(p.id, players)} - {p.cards_count}")
    return "\n".join(lines)


def describe_action(action: Action) -> str:
    if isinstance(action, DrawCard):
        return "DRAW"
    if isinstance(action, PassTurn):
        return "PASS"
    return f"PLAY {format_card(action.card)} ({action.card.id})"
