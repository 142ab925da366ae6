"""Simulate a game with random agents, printing every move."""

from unolite.agents.random_agent import RandomAgent
from unolite.engine import Action, PlayerView
from unolite.orchestration.game_runner import GameRunner
from unolite.render import describe_action, format_public_state


class LoggingAgent(RandomAgent):
    def get_action(self, view: PlayerView, actions: list[Action], player_id: str) -> Action | None:
        action = super().get_action(view, actions, player_id)
        if action is not None:
            print(f"> {player_id}: {describe_action(action)}")
        return action


def main():
    agents = {
        "p1": LoggingAgent("Bot1", seed=1),
        "p2": LoggingAgent("Bot2", seed=2),
    }

    runner = GameRunner(agents, seed=42)
    result = runner.run()

    print(format_public_state(result.state))
    print(f"Game finished! Winner: {result.winner}")
    print(f"Turns: {result.num_turns}")


if __name__ == "__main__":
    main()
