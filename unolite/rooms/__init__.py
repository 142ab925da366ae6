"""Room management."""

from unolite.rooms.manager import (
    LeaveResult,
    PlayerRoom,
    Room,
    RoomError,
    RoomManager,
    RoomPlayer,
)

__all__ = ["LeaveResult", "PlayerRoom", "Room", "RoomError", "RoomManager", "RoomPlayer"]
