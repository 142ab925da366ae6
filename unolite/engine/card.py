"""Card and Color types for UNO Lite."""

from dataclasses import dataclass
from enum import Enum


class Color(str, Enum):
    """Card colors."""

    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    YELLOW = "yellow"


CARD_VALUES = (0, 1, 2, 3, 4, 5, 6, 7, 8, 9)


@dataclass(frozen=True)
class Card:
    """A numbered UNO Lite card.

    Identity is the id; color and value decide whether the card can be played.
    """

    id: str
    color: Color
    value: int

    def __post_init__(self) -> None:
        if self.value not in CARD_VALUES:
            raise ValueError(f"Invalid card value: {self.value}")
        if not isinstance(self.color, Color):
            raise ValueError(f"Invalid card color: {self.color}")

    def matches(self, color: Color | None, value: int | None) -> bool:
        """True if this card can be played on the given color/value target."""
        return self.color == color or self.value == value

    def __str__(self) -> str:
        return f"{self.color.value}_{self.value}"
