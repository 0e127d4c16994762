"""Shared pytest fixtures for toyrobot tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from toyrobot.config.discovery import CONFIG_ENV_VAR
from toyrobot.domain.board import Board
from toyrobot.services.interpreter import CommandInterpreter


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def board() -> Board:
    """Empty default 5x5 board."""
    return Board()


@pytest.fixture
def interpreter(board: Board) -> CommandInterpreter:
    """Interpreter bound to the ``board`` fixture."""
    return CommandInterpreter(board)


@pytest.fixture
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty temp directory with no toyrobot config or env overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_config")`` on test classes
    that invoke the CLI or build settings from discovery.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    for name in (
        "TOYROBOT_BOARD__HEIGHT",
        "TOYROBOT_BOARD__WIDTH",
        "TOYROBOT_REPL__PROMPT",
        "TOYROBOT_REPL__BANNER",
    ):
        monkeypatch.delenv(name, raising=False)
