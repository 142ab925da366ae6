"""Random agent - plays a random legal card, drawing or passing otherwise."""

import random
from typing import Optional

from unolite.engine import Action, PlayCard, PlayerView


class RandomAgent:
    def __init__(self, name: str = "random", seed: Optional[int] = None):
        self._name = name
        self._rng = random.Random(seed)

    @property
    def name(self) -> str:
        return self._name

    def get_action(
        self,
        player_view: PlayerView,
        legal_actions: list[Action],
        player_id: str,
    ) -> Action | None:
        if not legal_actions:
            return None
        # Prefer playing over drawing/passing to make game progress
        plays = [a for a in legal_actions if isinstance(a, PlayCard)]
        return self._rng.choice(plays or legal_actions)
