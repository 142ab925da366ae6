"""Tests for settings loading."""

import pytest

from unolite.config import PROVIDERS, Settings, load_settings, validate_provider


def test_defaults() -> None:
    assert load_settings({}) == Settings()


def test_overrides() -> None:
    settings = load_settings({
        "UNOLITE_LLM_PROVIDER": "Groq",
        "UNOLITE_LLM_MODEL": "llama3",
        "UNOLITE_MAX_TURNS": "50",
        "UNOLITE_LOG_LEVEL": "debug",
    })
    assert settings == Settings(llm_provider="groq", llm_model="llama3", max_turns=50, log_level="DEBUG")


@pytest.mark.parametrize(
    "env",
    [
        {"UNOLITE_LLM_PROVIDER": "nope"},
        {"UNOLITE_MAX_TURNS": "many"},
        {"UNOLITE_MAX_TURNS": "0"},
        {"UNOLITE_LOG_LEVEL": "LOUD"},
    ],
)
def test_invalid_values(env: dict) -> None:
    with pytest.raises(ValueError):
        load_settings(env)


def test_validate_provider() -> None:
    assert validate_provider(" Ollama ") == "ollama"
    assert set(PROVIDERS) == {"openrouter", "groq", "ollama", "huggingface"}
    with pytest.raises(ValueError):
        validate_provider("carrier-pigeon")
