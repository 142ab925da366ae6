"""Built-in agents."""

from unolite.agents.human_agent import HumanAgent
from unolite.agents.llm_agent import LLMAgent
from unolite.agents.random_agent import RandomAgent

__all__ = ["HumanAgent", "LLMAgent", "RandomAgent"]
