"""CLI entry point."""

from __future__ import annotations

import logging
from typing import Optional

import typer

from unolite.config import Settings, load_settings, validate_provider

app = typer.Typer(help="Two-player UNO Lite with random, LLM and human agents")


def _setup(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _resolve_provider(llm_provider: Optional[str], settings: Settings) -> str:
    if llm_provider is None:
        return settings.llm_provider
    try:
        return validate_provider(llm_provider)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--llm-provider") from e


def _parse_agents(
    agent_specs: str,
    llm_provider: str,
    llm_model: str,
    seed: Optional[int] = None,
) -> dict[str, "AgentProtocol"]:
    from unolite.agent.protocol import AgentProtocol
    from unolite.agents.human_agent import HumanAgent
    from unolite.agents.llm_agent import LLMAgent
    from unolite.agents.random_agent import RandomAgent

    parts = [s.strip() for s in agent_specs.split(",") if s.strip()]
    if len(parts) != 2:
        raise typer.BadParameter(f"UNO Lite is played by exactly two agents, got {len(parts)}.")

    agents: dict[str, AgentProtocol] = {}
    for i, part in enumerate(parts):
        pid = f"player_{i}"
        if ":" in part:
            kind, model = part.split(":", 1)
        else:
            kind, model = part, llm_model
        kind = kind.lower()

        if kind == "llm":
            try:
                agents[pid] = LLMAgent(provider=llm_provider, model=model)
            except ValueError as e:
                raise typer.BadParameter(str(e)) from e
        elif kind == "human":
            agents[pid] = HumanAgent(name=f"Human_{i}")
        elif kind == "random":
            agents[pid] = RandomAgent(name=f"Random_{i}", seed=None if seed is None else seed + i)
        else:
            raise typer.BadParameter(f"Unknown agent type: {kind}. Use 'random', 'llm' or 'human'.")
    return agents


@app.command()
def play(
    agents: str = typer.Option(
        "human,random",
        "--agents",
        "-a",
        help="Comma-separated pair: random, human, llm or llm:model_name (e.g. human,llm:gpt-4o)",
    ),
    llm_provider: Optional[str] = typer.Option(
        None,
        "--llm-provider",
        "-p",
        help="LLM provider: openrouter, groq, ollama or huggingface",
    ),
    llm_model: Optional[str] = typer.Option(None, "--llm-model", "-m", help="Model name"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
) -> None:
    """Run a single UNO Lite game."""
    from unolite.orchestration.game_runner import GameRunner
    from unolite.render import format_public_state

    settings = load_settings()
    _setup(settings)
    agent_map = _parse_agents(
        agents,
        _resolve_provider(llm_provider, settings),
        llm_model or settings.llm_model,
        seed,
    )
    runner = GameRunner(agent_map, seed=seed, max_turns=settings.max_turns)
    result = runner.run()
    typer.echo(format_public_state(result.state))
    typer.echo(f"Winner: {result.winner or 'None (stalled)'}")
    typer.echo(f"Turns: {result.num_turns}")


@app.command()
def tournament(
    agents: str = typer.Option(
        "random,random",
        "--agents",
        "-a",
        help="Comma-separated pair of agent types or llm:model_name",
    ),
    games: int = typer.Option(100, "--games", "-g", help="Number of games"),
    llm_provider: Optional[str] = typer.Option(
        None,
        "--llm-provider",
        "-p",
        help="LLM provider: openrouter, groq, ollama or huggingface",
    ),
    llm_model: Optional[str] = typer.Option(None, "--llm-model", "-m", help="Model name"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
) -> None:
    """Run a tournament between two agents."""
    from unolite.orchestration.tournament import run_tournament

    settings = load_settings()
    _setup(settings)
    agent_map = _parse_agents(
        agents,
        _resolve_provider(llm_provider, settings),
        llm_model or settings.llm_model,
        seed,
    )
    wins = run_tournament(agent_map, num_games=games, seed=seed, max_turns=settings.max_turns)
    typer.echo("Tournament results:")
    for pid in agent_map:
        typer.echo(f"  {pid}: {wins.get(pid, 0)} wins")


if __name__ == "__main__":
    app()
