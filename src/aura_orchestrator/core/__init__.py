"""Core package initialization."""

from aura_orchestrator.core.config import AssistantConfig
from aura_orchestrator.core.session import SessionUser
from aura_orchestrator.core.orchestrator import Orchestrator

__all__ = [
    "AssistantConfig",
    "Orchestrator",
    "SessionUser",
]
