"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, drillctl.toml only contains
overrides. An empty (or missing) drillctl.toml is a valid configuration.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

# --- drillctl.toml sections ---


class GraphConfig(BaseModel):
    """[graph] section."""

    model_config = {"frozen": True}

    separator: str = Field(default="-", min_length=1)


class BoxConfig(BaseModel):
    """[box] section."""

    model_config = {"frozen": True}

    contents: list[Any] = Field(default_factory=list)


class MultiplyConfig(BaseModel):
    """[multiply] section.

    ``max_attempts = 0`` keeps the unbounded retry loop.
    """

    model_config = {"frozen": True}

    fault_rate: float = Field(default=0.8, ge=0.0, le=1.0)
    max_attempts: int = Field(default=0, ge=0)
    seed: int | None = None

