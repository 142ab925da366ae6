"""LLM agent using OpenAI library with OpenRouter, Groq, Ollama or Hugging Face."""

import json
import logging
import os
import re
import time
from typing import Optional

from openai import OpenAI

from unolite.config import PROVIDERS, validate_provider
from unolite.engine import Action, DrawCard, PassTurn, PlayerView
from unolite.render import describe_action, format_card

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 3


def _format_player_view(pv: PlayerView, player_id: str) -> str:
    """Format player view as text for the LLM."""
    lines = [
        "=== Your hand ===",
        " ".join(format_card(c) for c in pv.my_hand),
        "",
        "=== Top card on discard ===",
        format_card(pv.top_discard) if pv.top_discard else "None",
        "",
        "=== Color / value to match ===",
        f"{pv.current_color.value.upper() if pv.current_color else 'any'} / {pv.current_value}",
        "",
        "=== Opponent card counts ===",
    ]
    for pid, count in pv.num_cards_per_player.items():
        if pid != player_id:
            lines.append(f"  {pid}: {count} cards")
    lines.extend([
        "",
        "=== Already drew this turn ===",
        "yes" if pv.has_drawn_card else "no",
    ])
    return "\n".join(lines)


def _format_legal_actions(actions: list[Action]) -> str:
    return "\n".join(f"{i}: {describe_action(a)}" for i, a in enumerate(actions))


def _pick(actions: list[Action], idx: int) -> Action | None:
    if 0 <= idx < len(actions):
        return actions[idx]
    logger.debug("Index %d out of range (0-%d)", idx, len(actions) - 1)
    return None


def _parse_action_response(response: str, actions: list[Action]) -> Action | None:
    """Parse LLM response into an Action."""
    # 1. A JSON object, tolerating single quotes
    json_match = re.search(r"(\{.*?\})", response, re.DOTALL)
    if json_match:
        json_str = json_match.group(1)
        for candidate in (json_str, json_str.replace("'", '"')):
            try:
                data = json.loads(candidate)
            except json.JSONDecodeError:
                continue
            if isinstance(data, dict) and isinstance(data.get("action_index"), int):
                action = _pick(actions, data["action_index"])
                if action is not None:
                    return action
            break

    # 2. "action_index": N with any quoting
    match = re.search(r"[\"']?action_index[\"']?\s*:\s*(\d+)", response, re.IGNORECASE)
    if match:
        action = _pick(actions, int(match.group(1)))
        if action is not None:
            return action

    # 3. DRAW / PASS literally
    upper = response.upper()
    for keyword, kind in (("DRAW", DrawCard), ("PASS", PassTurn)):
        if keyword in upper:
            for a in actions:
                if isinstance(a, kind):
                    return a

    # 4. A standalone number
    cleaned = re.sub(r"[{}\[\]\"'.,:]", " ", response)
    for word in cleaned.split():
        if word.isdigit():
            action = _pick(actions, int(word))
            if action is not None:
                return action

    return None


class LLMAgent:
    """Agent that uses an LLM to choose actions."""

    def __init__(
        self,
        provider: str = "openrouter",
        model: str = "openai/gpt-4o-mini",
        api_key: Optional[str] = None,
        timeout: float = 30.0,
    ):
        provider = validate_provider(provider)
        spec = PROVIDERS[provider]
        base_url = os.environ.get(spec.base_url_env, spec.base_url) if spec.base_url_env else spec.base_url
        if spec.api_key_env is None:
            key = api_key or provider
        else:
            key = api_key or os.environ.get(spec.api_key_env)
        if not key:
            raise ValueError(f"API key required for {provider}. Set {spec.api_key_env} or pass api_key.")

        self._client = OpenAI(api_key=key, base_url=base_url)
        self._model = model
        self._timeout = timeout
        self._provider = provider
        logger.info("[%s] provider=%s base_url=%s timeout=%ss", self.name, provider, base_url, timeout)

    @property
    def name(self) -> str:
        return f"llm-{self._model}"

    def get_action(
        self,
        player_view: PlayerView,
        legal_actions: list[Action],
        player_id: str,
    ) -> Action | None:
        if not legal_actions:
            return None

        prompt = f"""You are playing UNO Lite, a two-player UNO with number cards only.
Objective: empty your hand first. A card can be played if it matches the top discard by color or by value.
If nothing matches you must draw one card; after drawing you may play a matching card or pass.

{_format_player_view(player_view, player_id)}

=== Legal actions ===
{_format_legal_actions(legal_actions)}

Respond with a JSON object containing the index of your chosen action.
Example: {{"action_index": 0}}
"""

        for attempt in range(1, MAX_ATTEMPTS + 1):
            start_time = time.time()
            try:
                resp = self._client.chat.completions.create(
                    model=self._model,
                    messages=[{"role": "user", "content": prompt}],
                    timeout=self._timeout,
                )
            except Exception as e:
                logger.warning(
                    "[%s] attempt %d failed after %.2fs: %s: %s",
                    self.name, attempt, time.time() - start_time, type(e).__name__, e,
                )
                continue

            content = resp.choices[0].message.content or ""
            logger.debug("[%s] response in %.2fs", self.name, time.time() - start_time)
            action = _parse_action_response(content, legal_actions)
            if action is not None:
                return action
            logger.warning("[%s] could not parse action from response: %r", self.name, content)

        logger.warning("[%s] all attempts failed, falling back", self.name)
        fallback = [a for a in legal_actions if isinstance(a, (DrawCard, PassTurn))]
        return fallback[0] if fallback else legal_actions[0]
