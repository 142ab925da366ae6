"""Single game runner."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from unolite.engine import (
    ErrorCode,
    GameState,
    Phase,
    PlayerView,
    apply_action,
    create_game,
    get_legal_actions,
    join_game,
    start_game,
)

if TYPE_CHECKING:
    from unolite.agent.protocol import AgentProtocol

logger = logging.getLogger(__name__)


@dataclass
class GameResult:
    """Result of a completed (or stalled) game."""

    winner: Optional[str]
    num_turns: int
    player_ids: tuple[str, ...]
    state: GameState


class GameRunner:
    """Runs a single two-player UNO Lite game to completion."""

    def __init__(
        self,
        agents: dict[str, "AgentProtocol"],
        seed: Optional[int] = None,
        max_turns: int = 1000,
        room_id: str = "local",
    ):
        if len(agents) != 2:
            raise ValueError(f"UNO Lite needs exactly two agents, got {len(agents)}")
        self._agents = agents
        self._seed = seed
        self._max_turns = max_turns
        self._room_id = room_id

    def run(self) -> GameResult:
        """Run the game and return the result."""
        rng = random.Random(self._seed)
        player_ids = list(self._agents.keys())
        state = create_game(self._room_id, player_ids[0])
        for pid in player_ids[1:]:
            join_game(state, pid).unwrap()
        start_game(state, rng.random).unwrap()

        num_turns = 0
        while state.phase == Phase.IN_PROGRESS and num_turns < self._max_turns:
            pid = state.turn.active_player_id
            legal = get_legal_actions(state, pid)
            if not legal:
                break

            action = self._agents[pid].get_action(PlayerView.from_state(state, pid), legal, pid)
            if action is None or action not in legal:
                if action is not None:
                    logger.warning("%s chose illegal action %r, using %r", pid, action, legal[0])
                action = legal[0]

            result = apply_action(state, pid, action, rng.random)
            if not result.ok:
                if result.error.code == ErrorCode.NO_CARDS_TO_DRAW:
                    logger.warning("Room %s stalled: %s", self._room_id, result.error.message)
                    break
                result.unwrap()
            num_turns += 1

        return GameResult(
            winner=state.winner_id,
            num_turns=num_turns,
            player_ids=tuple(player_ids),
            state=state,
        )
