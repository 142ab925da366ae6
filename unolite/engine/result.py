"""Error codes and the result wrapper returned by every engine operation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorCode(str, Enum):
    """Why an engine operation was rejected."""

    GAME_NOT_READY = "GAME_NOT_READY"
    GAME_ALREADY_STARTED = "GAME_ALREADY_STARTED"
    PLAYER_ALREADY_JOINED = "PLAYER_ALREADY_JOINED"
    PLAYER_NOT_FOUND = "PLAYER_NOT_FOUND"
    ROOM_FULL = "ROOM_FULL"
    NOT_ENOUGH_PLAYERS = "NOT_ENOUGH_PLAYERS"
    NOT_PLAYER_TURN = "NOT_PLAYER_TURN"
    CARD_NOT_PLAYABLE = "CARD_NOT_PLAYABLE"
    CARD_NOT_FOUND = "CARD_NOT_FOUND"
    MUST_DRAW_FIRST = "MUST_DRAW_FIRST"
    ALREADY_DREW_CARD = "ALREADY_DREW_CARD"
    DRAW_PILE_EMPTY = "DRAW_PILE_EMPTY"
    NO_CARDS_TO_DRAW = "NO_CARDS_TO_DRAW"


@dataclass(frozen=True)
class GameError:
    code: ErrorCode
    message: str


class GameRuleError(Exception):
    """Raised by Result.unwrap() when a caller prefers exceptions."""

    def __init__(self, code: ErrorCode, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a success holding value, or a failure holding error."""

    value: Optional[T] = None
    error: Optional[GameError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, code: ErrorCode, message: str) -> "Result[T]":
        return cls(error=GameError(code=code, message=message))

    def unwrap(self) -> T:
        """Return the value or raise GameRuleError for a failure."""
        if self.error is not None:
            raise GameRuleError(self.error.code, self.error.message)
        return self.value  # type: ignore[return-value]
