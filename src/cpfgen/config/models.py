"""Sections of ``cpfgen.toml``.

A config file only needs the keys it changes; every field has a default.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class GeneratorConfig(BaseModel):
    """``[generator]``: how ``cpfgen generate`` and the menu draw numbers."""

    model_config = {"frozen": True}

    seed: int | None = None
    count: int = Field(default=1, ge=1)


class MenuConfig(BaseModel):
    """``[menu]``: interactive menu text."""

    model_config = {"frozen": True}

    title: str = "CPF GENERATOR"
