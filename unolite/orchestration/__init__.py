"""Game orchestration."""

from unolite.orchestration.game_runner import GameResult, GameRunner
from unolite.orchestration.tournament import run_tournament

__all__ = ["GameResult", "GameRunner", "run_tournament"]
