"""Language service package initialization."""

from aura_orchestrator.llm.factory import LLMFactory
from aura_orchestrator.llm.provider import AdapterError, GenerationError, LanguageService

__all__ = [
    "AdapterError",
    "GenerationError",
    "LLMFactory",
    "LanguageService",
]
