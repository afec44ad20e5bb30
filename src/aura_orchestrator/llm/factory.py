"""Factory for creating language services."""

import logging

from aura_orchestrator.core.config import LLMConfig
from aura_orchestrator.llm.files import UploadedFileRegistry
from aura_orchestrator.llm.openai_provider import OpenAIProvider
from aura_orchestrator.llm.provider import LanguageService

logger = logging.getLogger(__name__)


class LLMFactory:
    """Factory for creating language service instances."""

    @staticmethod
    def create(
        config: LLMConfig,
        *,
        files: UploadedFileRegistry,
        assistant_name: str,
    ) -> LanguageService:
        """Create a language service based on configuration.

        Args:
            config: Language service configuration specifying the provider.
            files: Uploaded-file registry the service reads context from.
            assistant_name: Name the assistant uses for itself.

        Returns:
            Configured language service instance.

        Raises:
            ValueError: If provider type is not supported.
        """
        logger.info(f"Creating language service: {config.provider}")

        if config.provider == "openai":
            return OpenAIProvider(config, files=files, assistant_name=assistant_name)
        else:
            raise ValueError(f"Unsupported LLM provider: {config.provider}")
