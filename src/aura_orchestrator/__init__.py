"""AURA message orchestration engine.

Routes each user utterance through a language service, handles plain replies,
image requests and booking requests, and keeps the conversation transcript and
suggested tasks consistent when any step fails.
"""

__version__ = "0.1.0"

from aura_orchestrator.core.config import AssistantConfig

__all__ = ["__version__", "AssistantConfig"]
