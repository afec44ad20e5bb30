"""Test configuration and fixtures."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

import pytest

from aura_orchestrator.booking.actions import AgenticAction
from aura_orchestrator.booking.dispatcher import ActionDispatcher, DomainHandler, HandlerResult
from aura_orchestrator.booking.domains import DomainTag
from aura_orchestrator.core.config import (
    AssistantConfig,
    BookingConfig,
    FileConfig,
    LLMConfig,
)
from aura_orchestrator.core.orchestrator import Orchestrator
from aura_orchestrator.core.session import SessionUser
from aura_orchestrator.llm.files import UploadedFileRegistry
from aura_orchestrator.llm.provider import LanguageService


class FakeLanguageService(LanguageService):
    """Scripted language service.

    Each reply may be a value or an exception instance to raise. Every call is
    recorded as ``(method, argument)`` in :attr:`calls`.
    """

    def __init__(
        self,
        *,
        reply: str | Exception = "Hello!",
        action: AgenticAction | None | Exception = None,
        suggestions: list[str] | Exception | None = None,
        image_url: str | Exception = "https://images.example/cat.png",
    ) -> None:
        self.reply = reply
        self.action = action
        self.suggestions = suggestions if suggestions is not None else []
        self.image_url = image_url
        self.calls: list[tuple[str, str]] = []
        self.on_call: Callable[[str], None] | None = None

    def _record(self, method: str, arg: str) -> None:
        self.calls.append((method, arg))
        if self.on_call is not None:
            self.on_call(method)

    @staticmethod
    def _resolve(value: Any) -> Any:
        if isinstance(value, Exception):
            raise value
        return value

    def called(self, method: str) -> bool:
        return any(name == method for name, _ in self.calls)

    async def complete(self, text: str) -> str:
        self._record("complete", text)
        return self._resolve(self.reply)

    async def agentic_action(self, text: str) -> AgenticAction | None:
        self._record("agentic_action", text)
        return self._resolve(self.action)

    async def suggest_tasks(self, text: str) -> list[str]:
        self._record("suggest_tasks", text)
        return list(self._resolve(self.suggestions))

    async def generate_image(self, prompt: str) -> str:
        self._record("generate_image", prompt)
        return self._resolve(self.image_url)


class FakeHandler:
    """Domain handler returning a fixed result (or raising)."""

    def __init__(self, result: HandlerResult | None | Exception) -> None:
        self.result = result
        self.calls: list[tuple[AgenticAction, str]] = []

    async def handle(self, action: AgenticAction, utterance: str) -> HandlerResult | None:
        self.calls.append((action, utterance))
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


@pytest.fixture
def session_user() -> SessionUser:
    """Provide a signed-in test user."""
    return SessionUser(user_id="u-1", email="ada@example.com", full_name="Ada Lovelace")


@pytest.fixture
def llm_config() -> LLMConfig:
    """Provide a test language service configuration."""
    return LLMConfig(openai_api_key="test-key", openai_model="gpt-4o-mini")


@pytest.fixture
def assistant_config(llm_config: LLMConfig) -> AssistantConfig:
    """Provide a test assistant configuration."""
    return AssistantConfig(
        log_level="DEBUG",
        debug=True,
        assistant_name="A.U.R.A",
        llm=llm_config,
        booking=BookingConfig(base_url=None),
        files=FileConfig(max_upload_bytes=1024),
    )


@pytest.fixture
def make_orchestrator(
    session_user: SessionUser, assistant_config: AssistantConfig
) -> Callable[..., Orchestrator]:
    """Build an orchestrator around a fake language service and handlers."""

    def _make(
        language: LanguageService,
        handlers: Mapping[DomainTag, DomainHandler] | None = None,
    ) -> Orchestrator:
        return Orchestrator(
            user=session_user,
            language=language,
            dispatcher=ActionDispatcher(handlers or {}),
            files=UploadedFileRegistry(),
            config=assistant_config,
        )

    return _make


@pytest.fixture
def fake_language() -> type[FakeLanguageService]:
    """Provide the scripted language service class."""
    return FakeLanguageService


@pytest.fixture
def fake_handler() -> type[FakeHandler]:
    """Provide the scripted domain handler class."""
    return FakeHandler
