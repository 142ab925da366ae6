"""Human agent - reads actions from terminal."""

from unolite.engine import Action, PlayerView
from unolite.render import describe_action, format_card, format_hand


class HumanAgent:
    """Agent that prompts the human for input via terminal."""

    def __init__(self, name: str = "human"):
        self._name = name

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

        print(f"\n--- Your turn, {self._name} ---")
        print("Your hand:")
        print(format_hand(player_view.my_hand))
        top = player_view.top_discard
        print("Top discard:", format_card(top) if top else "-")
        for pid, count in player_view.num_cards_per_player.items():
            if pid != player_id:
                print(f"{pid} holds {count} cards")
        print("\nLegal actions:")
        for i, a in enumerate(legal_actions):
            print(f"  {i}: {describe_action(a)}")

        while True:
            try:
                raw = input("Enter number: ").strip()
                idx = int(raw)
                if 0 <= idx < len(legal_actions):
                    return legal_actions[idx]
            except ValueError:
                pass
            except EOFError:
                return None
            print("Invalid. Try again.")
