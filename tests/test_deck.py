"""Unit tests for deck construction and shuffling."""

import random
from collections import Counter

from unolite.engine import Color, create_deck, draw_top_card, shuffle


def test_create_deck_size() -> None:
    assert len(create_deck()) == 76


def test_create_deck_composition() -> None:
    deck = create_deck()
    counts = Counter((c.color, c.value) for c in deck)
    for color in Color:
        assert counts[(color, 0)] == 1
        for value in range(1, 10):
            assert counts[(color, value)] == 2


def test_create_deck_ids_unique_and_ordered() -> None:
    deck = create_deck()
    assert [c.id for c in deck] == [f"card-{i}" for i in range(76)]
    assert deck[0].color == Color.RED and deck[0].value == 0
    assert deck[-1].color == Color.YELLOW and deck[-1].value == 9


def test_shuffle_reproducible() -> None:
    deck = create_deck()
    s1 = shuffle(deck, random.Random(123).random)
    s2 = shuffle(deck, random.Random(123).random)
    assert [c.id for c in s1] == [c.id for c in s2]
    assert sorted(c.id for c in s1) == sorted(c.id for c in deck)


def test_shuffle_with_constant_source() -> None:
    # Always picking index 0 rotates the sequence left by one
    assert shuffle([1, 2, 3, 4], lambda: 0) == [2, 3, 4, 1]
    # Always picking index i leaves it untouched
    assert shuffle([1, 2, 3, 4], lambda: 0.999) == [1, 2, 3, 4]


def test_shuffle_does_not_mutate_input() -> None:
    items = [1, 2, 3, 4, 5]
    shuffle(items, random.Random(7).random)
    assert items == [1, 2, 3, 4, 5]


def test_shuffle_short_sequences() -> None:
    assert shuffle([], lambda: 0) == []
    assert shuffle(["x"], lambda: 0) == ["x"]


def test_draw_top_card() -> None:
    items = [1, 2, 3]
    assert draw_top_card(items) == 3
    assert items == [1, 2]
    assert draw_top_card([]) is None
