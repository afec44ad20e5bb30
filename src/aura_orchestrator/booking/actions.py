"""Structured action descriptions produced by the language service."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from aura_orchestrator.booking.domains import DomainTag


class AgenticAction(BaseModel):
    """What the user asked a booking domain to do.

    ``parameters`` is whatever the model extracted from the utterance (dates,
    quantities, places); the domain backend interprets it.
    """

    domain: DomainTag
    action: str = Field(min_length=1)
    parameters: dict[str, Any] = Field(default_factory=dict)
    summary: str | None = None
