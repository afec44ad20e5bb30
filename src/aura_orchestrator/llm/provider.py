"""Abstract base class for language services."""

from abc import ABC, abstractmethod

from aura_orchestrator.booking.actions import AgenticAction


class AdapterError(RuntimeError):
    """The language service could not be reached or returned an unusable reply."""


class GenerationError(RuntimeError):
    """Image generation failed."""


class LanguageService(ABC):
    """Abstract base class for language services.

    This interface allows pluggable model backends. All calls are coroutines and
    report failures through :class:`AdapterError` / :class:`GenerationError`.
    """

    @abstractmethod
    async def complete(self, text: str) -> str:
        """Produce the assistant reply for a user utterance.

        Args:
            text: The user's utterance.

        Returns:
            Plain assistant text, or an action sigil.

        Raises:
            AdapterError: If the service call fails.
        """

    @abstractmethod
    async def agentic_action(self, text: str) -> AgenticAction | None:
        """Extract a structured booking action from an utterance.

        Args:
            text: The user's utterance.

        Returns:
            The action, or ``None`` when no usable action could be derived.

        Raises:
            AdapterError: If the service call fails.
        """

    @abstractmethod
    async def suggest_tasks(self, text: str) -> list[str]:
        """Suggest follow-up task titles for an utterance.

        Raises:
            AdapterError: If the service call fails.
        """

    @abstractmethod
    async def generate_image(self, prompt: str) -> str:
        """Generate an image and return its URL.

        Raises:
            GenerationError: If generation fails.
        """
