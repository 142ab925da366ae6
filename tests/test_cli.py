"""Smoke tests for the command line."""

from typer.testing import CliRunner

from unolite.cli import app

runner = CliRunner()


def test_tournament_command() -> None:
    result = runner.invoke(app, ["tournament", "--agents", "random,random", "--games", "2", "--seed", "1"])
    assert result.exit_code == 0
    assert "Tournament results:" in result.output
    assert "player_0:" in result.output


def test_play_command() -> None:
    result = runner.invoke(app, ["play", "--agents", "random,random", "--seed", "4"])
    assert result.exit_code == 0
    assert "Turns:" in result.output


def test_rejects_unknown_agent() -> None:
    result = runner.invoke(app, ["play", "--agents", "random,wizard"])
    assert result.exit_code != 0


def test_rejects_wrong_agent_count() -> None:
    result = runner.invoke(app, ["tournament", "--agents", "random"])
    assert result.exit_code != 0


def test_rejects_unknown_provider() -> None:
    result = runner.invoke(app, ["play", "--agents", "random,random", "--llm-provider", "nope"])
    assert result.exit_code == 2
    assert "Turns:" not in result.output
