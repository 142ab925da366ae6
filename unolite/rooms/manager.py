"""Room bookkeeping: maps players to the game they are seated in."""

from __future__ import annotations

import logging
import random as _random
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from unolite.engine import GameState, RandomFn, create_game, join_game, start_game

logger = logging.getLogger(__name__)

ROOM_CODE_LENGTH = 5
ROOM_SYMBOLS = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"


class RoomError(Exception):
    """A room-level request that cannot be honoured."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


@dataclass
class RoomPlayer:
    id: str
    display_name: str
    username: Optional[str] = None


@dataclass
class Room:
    id: str
    host_id: str
    game: GameState
    players: Dict[str, RoomPlayer] = field(default_factory=dict)


@dataclass
class PlayerRoom:
    room: Room
    player: RoomPlayer


@dataclass
class LeaveResult:
    room: Room
    remaining: List[RoomPlayer]


class RoomManager:
    """In-memory registry of rooms, one game per room.

    The random source picks room codes and shuffles decks; it defaults to the
    module-level generator so only this outer layer touches ambient randomness.
    """

    def __init__(self, random: Optional[RandomFn] = None):
        self._random = random or _random.random
        self._rooms: Dict[str, Room] = {}
        self._player_to_room: Dict[str, str] = {}

    def _generate_room_id(self) -> str:
        return "".join(
            ROOM_SYMBOLS[int(self._random() * len(ROOM_SYMBOLS))]
            for _ in range(ROOM_CODE_LENGTH)
        )

    def _require_room(self, room_id: str) -> Room:
        room = self._rooms.get(room_id.strip().upper())
        if room is None:
            raise RoomError("ROOM_NOT_FOUND", "Room not found.")
        return room

    def create_room(self, player: RoomPlayer) -> Room:
        if player.id in self._player_to_room:
            raise RoomError("ALREADY_IN_ROOM", "You are already in a room.")

        room_id = self._generate_room_id()
        while room_id in self._rooms:
            room_id = self._generate_room_id()

        room = Room(
            id=room_id,
            host_id=player.id,
            game=create_game(room_id, player.id),
            players={player.id: player},
        )
        self._rooms[room_id] = room
        self._player_to_room[player.id] = room_id
        logger.info("Room %s created by %s", room_id, player.id)
        return room

    def join_room(self, room_id: str, player: RoomPlayer) -> Room:
        """Seat player in an existing room. Engine rejections raise GameRuleError."""
        if player.id in self._player_to_room:
            raise RoomError("ALREADY_IN_ROOM", "Leave your current room first.")

        room = self._require_room(room_id)
        join_game(room.game, player.id).unwrap()
        room.players[player.id] = player
        self._player_to_room[player.id] = room.id
        logger.info("Room %s joined by %s", room.id, player.id)
        return room

    def start_room(self, room_id: str) -> Room:
        room = self._require_room(room_id)
        start_game(room.game, self._random).unwrap()
        logger.info("Room %s started", room.id)
        return room

    def get_room(self, room_id: str) -> Optional[Room]:
        return self._rooms.get(room_id.strip().upper())

    def get_room_by_player(self, player_id: str) -> Optional[PlayerRoom]:
        room_id = self._player_to_room.get(player_id)
        if room_id is None:
            return None
        room = self._rooms.get(room_id)
        player = room.players.get(player_id) if room else None
        if room is None or player is None:
            # Stale mapping
            del self._player_to_room[player_id]
            return None
        return PlayerRoom(room=room, player=player)

    def leave_room(self, player_id: str) -> Optional[LeaveResult]:
        """Remove the player and close their room. Returns who was left behind."""
        mapping = self.get_room_by_player(player_id)
        if mapping is None:
            return None

        room = mapping.room
        del room.players[player_id]
        del self._player_to_room[player_id]

        remaining = list(room.players.values())
        for other in remaining:
            self._player_to_room.pop(other.id, None)
        del self._rooms[room.id]
        logger.info("Room %s closed after %s left", room.id, player_id)
        return LeaveResult(room=room, remaining=remaining)

    def get_opponent(self, room: Room, player_id: str) -> Optional[RoomPlayer]:
        return next((p for p in room.players.values() if p.id != player_id), None)

    def list_rooms(self) -> List[Room]:
        return list(self._rooms.values())
