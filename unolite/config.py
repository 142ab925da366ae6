"""Settings read from the environment (and a .env file, if present)."""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv


@dataclass(frozen=True)
class ProviderSpec:
    """Where an OpenAI-compatible provider lives and which env var holds its key.

    A provider without api_key_env needs no key; base_url_env overrides base_url.
    """

    base_url: str
    api_key_env: Optional[str] = None
    base_url_env: Optional[str] = None


PROVIDERS = {
    "openrouter": ProviderSpec("https://openrouter.ai/api/v1", api_key_env="OPENROUTER_API_KEY"),
    "groq": ProviderSpec("https://api.groq.com/openai/v1", api_key_env="GROQ_API_KEY"),
    "ollama": ProviderSpec("http://localhost:11434/v1", base_url_env="OLLAMA_BASE_URL"),
    "huggingface": ProviderSpec("https://router.huggingface.co/v1", api_key_env="HUGGINGFACE_API_KEY"),
}


def validate_provider(name: str) -> str:
    """Normalise a provider name, raising ValueError if it is not in PROVIDERS."""
    provider = name.strip().lower()
    if provider not in PROVIDERS:
        raise ValueError(f"LLM provider must be one of {', '.join(PROVIDERS)}, got {name!r}")
    return provider


@dataclass(frozen=True)
class Settings:
    llm_provider: str = "openrouter"
    llm_model: str = "openai/gpt-4o-mini"
    max_turns: int = 1000
    log_level: str = "WARNING"


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from env, defaulting to os.environ after loading .env."""
    if env is None:
        load_dotenv()
        env = os.environ

    defaults = Settings()
    provider = validate_provider(env.get("UNOLITE_LLM_PROVIDER", defaults.llm_provider))

    raw_turns = env.get("UNOLITE_MAX_TURNS", str(defaults.max_turns))
    try:
        max_turns = int(raw_turns)
    except ValueError:
        raise ValueError(f"UNOLITE_MAX_TURNS must be an integer, got {raw_turns!r}") from None
    if max_turns <= 0:
        raise ValueError(f"UNOLITE_MAX_TURNS must be positive, got {max_turns}")

    log_level = env.get("UNOLITE_LOG_LEVEL", defaults.log_level).strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"Unknown UNOLITE_LOG_LEVEL: {log_level!r}")

    return Settings(
        llm_provider=provider,
        llm_model=env.get("UNOLITE_LLM_MODEL", defaults.llm_model),
        max_turns=max_turns,
        log_level=log_level,
    )
