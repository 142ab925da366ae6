"""Deck creation, shuffling and drawing."""

import math
from typing import Callable, List, Optional, Sequence, TypeVar

from unolite.engine.card import CARD_VALUES, Card, Color

T = TypeVar("T")

RandomFn = Callable[[], float]

DECK_SIZE = 76


def create_deck() -> List[Card]:
    """Create the 76-card UNO Lite deck in canonical order.

    - 4 colors × (one 0, two each of 1-9): 76 cards
    - ids are card-0 .. card-75, color-major, value-minor
    """
    cards: List[Card] = []
    next_id = 0

    for color in Color:
        cards.append(Card(id=f"card-{next_id}", color=color, value=0))
        next_id += 1
        for value in CARD_VALUES[1:]:  # skip 0
            for _ in range(2):
                cards.append(Card(id=f"card-{next_id}", color=color, value=value))
                next_id += 1

    return cards


def shuffle(items: Sequence[T], random: RandomFn) -> List[T]:
    """Return a shuffled copy of items (Fisher-Yates, driven by random())."""
    copy = list(items)
    for i in range(len(copy) - 1, 0, -1):
        j = math.floor(random() * (i + 1))
        copy[i], copy[j] = copy[j], copy[i]
    return copy


def draw_top_card(items: List[T]) -> Optional[T]:
    """Pop the top (last) item, or None if there is nothing left."""
    if not items:
        return None
    return items.pop()
