"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, toyrobot.toml only contains
overrides. An empty file yields the classic 5x5 board.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from toyrobot.domain.board import DEFAULT_HEIGHT, DEFAULT_WIDTH


class BoardConfig(BaseModel):
    """[board] section."""

    model_config = {"frozen": True}

    height: int = Field(default=DEFAULT_HEIGHT, ge=1)
    width: int = Field(default=DEFAULT_WIDTH, ge=1)


class ReplConfig(BaseModel):
    """[repl] section."""

    model_config = {"frozen": True}

    prompt: str = "> "
    banner: bool = True
