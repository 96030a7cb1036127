"""Heading model."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict


class Heading(BaseModel):
    """A level-2/3 heading found in an index document."""

    model_config = ConfigDict(frozen=True)

    text: str
    level: Literal[2, 3] = 2
    line_number: int = 0
    anchor_override: str | None = None
