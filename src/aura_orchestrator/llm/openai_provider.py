"""OpenAI language service implementation."""

import json
import logging
from collections import deque
from typing import Any

from openai import AsyncOpenAI, OpenAIError
from pydantic import ValidationError

from aura_orchestrator.booking.actions import AgenticAction
from aura_orchestrator.core.config import LLMConfig
from aura_orchestrator.llm.files import UploadedFileRegistry
from aura_orchestrator.llm.prompts import (
    AGENTIC_ACTION_PROMPT,
    TASK_SUGGESTION_PROMPT,
    system_prompt,
)
from aura_orchestrator.llm.provider import AdapterError, GenerationError, LanguageService

logger = logging.getLogger(__name__)


class OpenAIProvider(LanguageService):
    """OpenAI API provider implementation."""

    def __init__(
        self,
        config: LLMConfig,
        *,
        files: UploadedFileRegistry,
        assistant_name: str = "A.U.R.A",
        client: AsyncOpenAI | None = None,
    ) -> None:
        """Initialize the OpenAI provider.

        Args:
            config: Language service configuration.
            files: Registry of uploaded files injected as context on every completion.
            assistant_name: Name the assistant uses for itself.
            client: Pre-built client (tests); created from the API key when omitted.

        Raises:
            ValueError: If no client is given and the API key is missing.
        """
        if client is None and not config.openai_api_key:
            raise ValueError("OpenAI API key is required")

        self.config = config
        self.client = client or AsyncOpenAI(api_key=config.openai_api_key)
        self.model = config.openai_model
        self.temperature = config.openai_temperature
        self.files = files
        self.assistant_name = assistant_name
        self._history: deque[dict[str, str]] = deque(maxlen=config.history_limit)

        logger.info(f"OpenAI provider initialized with model: {self.model}")

    async def _chat(self, messages: list[dict[str, str]], **kwargs: Any) -> str:
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=messages,  # type: ignore
                **kwargs,
            )
        except OpenAIError as e:
            raise AdapterError(f"Chat completion failed: {e}") from e

        if not response.choices:
            raise AdapterError("Chat completion returned no choices")
        return response.choices[0].message.content or ""

    async def complete(self, text: str) -> str:
        """Generate the assistant reply using the running chat history.

        Args:
            text: The user's utterance.

        Returns:
            Assistant text or an action sigil.
        """
        context = self.files.context_block(self.config.file_context_chars)
        messages = [
            {"role": "system", "content": system_prompt(self.assistant_name, context)},
            *self._history,
            {"role": "user", "content": text},
        ]

        logger.debug(f"Generating completion with {len(messages)} messages")
        content = await self._chat(messages, temperature=self.temperature)
        if not content.strip():
            raise AdapterError("Chat completion returned empty content")

        self._history.append({"role": "user", "content": text})
        self._history.append({"role": "assistant", "content": content})
        logger.debug(f"Generated {len(content)} characters")
        return content

    async def agentic_action(self, text: str) -> AgenticAction | None:
        content = await self._chat(
            [
                {"role": "system", "content": AGENTIC_ACTION_PROMPT},
                {"role": "user", "content": text},
            ],
            temperature=0,
            response_format={"type": "json_object"},
        )

        try:
            data = json.loads(content)
        except json.JSONDecodeError:
            logger.warning("Agentic action reply was not JSON")
            return None
        if not isinstance(data, dict) or data.get("domain") is None:
            return None

        try:
            return AgenticAction.model_validate(data)
        except ValidationError as e:
            logger.warning(f"Agentic action reply failed validation: {e.error_count()} errors")
            return None

    async def suggest_tasks(self, text: str) -> list[str]:
        limit = self.config.max_task_suggestions
        if limit == 0:
            return []

        content = await self._chat(
            [
                {"role": "system", "content": TASK_SUGGESTION_PROMPT.format(limit=limit)},
                {"role": "user", "content": text},
            ],
            temperature=self.temperature,
            response_format={"type": "json_object"},
        )

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise AdapterError("Task suggestion reply was not JSON") from e

        raw = data.get("tasks") if isinstance(data, dict) else None
        if not isinstance(raw, list):
            return []
        titles = [item.strip() for item in raw if isinstance(item, str) and item.strip()]
        return titles[:limit]

    async def generate_image(self, prompt: str) -> str:
        if not prompt.strip():
            raise GenerationError("Image prompt is empty")

        logger.debug(f"Generating image for prompt: {prompt[:100]}...")
        try:
            response = await self.client.images.generate(
                model=self.config.image_model,
                prompt=prompt,
                size=self.config.image_size,  # type: ignore
                n=1,
            )
        except OpenAIError as e:
            raise GenerationError(f"Image generation failed: {e}") from e

        url = response.data[0].url if response.data else None
        if not url:
            raise GenerationError("Image generation returned no URL")
        return url
