"""Main orchestrator implementation."""

from __future__ import annotations

import asyncio
import logging
import math

from aura_orchestrator.booking.dispatcher import ActionDispatcher
from aura_orchestrator.booking.http import build_handlers
from aura_orchestrator.conversation.tasks import TaskCollector, TaskSuggestion
from aura_orchestrator.conversation.turns import (
    ConversationStore,
    ImageAttachment,
    OrderAttachment,
    Turn,
)
from aura_orchestrator.core.config import AssistantConfig
from aura_orchestrator.core.session import SessionUser
from aura_orchestrator.core.status import StatusFlag, StatusSnapshot, TransientStatus
from aura_orchestrator.llm.classification import BookingRequest, ImageRequest, PlainText, classify
from aura_orchestrator.llm.factory import LLMFactory
from aura_orchestrator.llm.files import (
    ExtractedFile,
    FileExtractor,
    TextFileExtractor,
    UploadedFileRegistry,
)
from aura_orchestrator.llm.provider import LanguageService

logger = logging.getLogger(__name__)

CONNECTION_APOLOGY = (
    "I apologize, but I encountered a brief connection issue. Please try your message "
    "again, and I'll be ready to assist you."
)
IMAGE_APOLOGY = (
    "I apologize, but I encountered an issue generating the image. Please try again "
    "with a different prompt."
)
BOOKING_APOLOGY = (
    "I apologize, but I encountered an issue processing your request. Please try again."
)


class SubmitInProgressError(RuntimeError):
    """A call was made while a message was still being processed."""


def _format_size(size: int) -> str:
    for unit, scale in (("MB", 1024 * 1024), ("KB", 1024)):
        if size >= scale:
            return f"{math.ceil(size / scale)}{unit}"
    return f"{size} bytes"


class Orchestrator:
    """Per-turn protocol tying the language service, dispatcher and stores together.

    One orchestrator serves one session. ``submit`` calls must not overlap: callers
    are expected to wait while :attr:`status` reports ``composing``.
    """

    def __init__(
        self,
        *,
        user: SessionUser,
        language: LanguageService,
        dispatcher: ActionDispatcher,
        files: UploadedFileRegistry,
        config: AssistantConfig | None = None,
        extractor: FileExtractor | None = None,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            user: Identity the session runs for; used in the greeting.
            language: Language service used for completions, actions, suggestions
                and images.
            dispatcher: Routes booking actions to their domain handlers.
            files: Uploaded-file registry shared with the language service.
            config: Configuration object. If None, loads from environment.
            extractor: Text extractor for uploads. Defaults to plain text files.
        """
        self.config = config or AssistantConfig()
        self.user = user
        self.language = language
        self.dispatcher = dispatcher
        self.files = files
        self.extractor: FileExtractor = extractor or TextFileExtractor()

        self._conversation = ConversationStore.seeded(user, self.config.assistant_name)
        self._tasks = TaskCollector()
        self._status = TransientStatus()
        self._deferred: list[str] = []

        logger.info("Orchestrator initialized", extra={"user_id": user.user_id})

    @classmethod
    def from_config(cls, config: AssistantConfig, user: SessionUser) -> Orchestrator:
        """Build the orchestrator and its collaborators from configuration."""

        files = UploadedFileRegistry()
        language = LLMFactory.create(config.llm, files=files, assistant_name=config.assistant_name)
        dispatcher = ActionDispatcher(build_handlers(config.booking))
        return cls(user=user, language=language, dispatcher=dispatcher, files=files, config=config)

    @property
    def messages(self) -> tuple[Turn, ...]:
        return self._conversation.snapshot()

    @property
    def tasks(self) -> tuple[TaskSuggestion, ...]:
        return self._tasks.snapshot()

    @property
    def task_collector(self) -> TaskCollector:
        """The collector itself, for the task-center surface."""

        return self._tasks

    @property
    def status(self) -> StatusSnapshot:
        return self._status.snapshot()

    @property
    def uploaded_files(self) -> tuple[ExtractedFile, ...]:
        return self.files.snapshot()

    async def submit(self, utterance: str) -> None:
        """Run one conversational turn.

        Appends the user turn, at most one assistant turn and a batch of task
        suggestions. Failures become apology turns; nothing is raised except
        :class:`SubmitInProgressError` for overlapping calls.

        Args:
            utterance: The user's text. Empty or whitespace-only input is ignored.
        """
        if not utterance.strip():
            return
        if self._status.composing:
            raise SubmitInProgressError("A message is already being processed")

        self._conversation.append_user(utterance)
        try:
            with self._status.hold(StatusFlag.COMPOSING):
                try:
                    response = await self.language.complete(utterance)
                except Exception:
                    logger.exception("Primary completion failed")
                    self._conversation.append_assistant(CONNECTION_APOLOGY)
                    return

                await self._handle_response(utterance, response)
                await self._collect_suggestions(utterance)
        finally:
            self._flush_deferred()

    def _flush_deferred(self) -> None:
        while self._deferred:
            self._conversation.append_assistant(self._deferred.pop(0))

    async def _handle_response(self, utterance: str, response: str) -> None:
        kind = classify(response)
        logger.info("Response classified", extra={"kind": type(kind).__name__})

        if isinstance(kind, ImageRequest):
            await self._generate_image(kind.prompt)
        elif isinstance(kind, BookingRequest):
            await self._handle_booking(kind, utterance)
        elif isinstance(kind, PlainText):
            self._conversation.append_assistant(kind.text)

    async def _generate_image(self, prompt: str) -> None:
        with self._status.hold(StatusFlag.GENERATING_IMAGE):
            try:
                url = await self.language.generate_image(prompt)
            except Exception:
                logger.exception("Image generation failed")
                self._conversation.append_assistant(IMAGE_APOLOGY)
                return

        self._conversation.append_assistant(
            f"I've generated an image based on your request: \"{prompt}\"",
            ImageAttachment(url=url, prompt=prompt),
        )

    async def _handle_booking(self, request: BookingRequest, utterance: str) -> None:
        with self._status.hold(StatusFlag.COMPOSING):
            try:
                action = await self.language.agentic_action(utterance)
                if action is None:
                    logger.warning(
                        "No usable action for booking request; no reply appended",
                        extra={"domain": request.domain.value},
                    )
                    return

                if action.domain is not request.domain:
                    logger.info(
                        "Action domain differs from requested domain",
                        extra={
                            "requested": request.domain.value,
                            "action_domain": action.domain.value,
                        },
                    )

                result = await self.dispatcher.dispatch(action, utterance)
            except Exception:
                logger.exception("Booking request failed", extra={"domain": request.domain.value})
                self._conversation.append_assistant(BOOKING_APOLOGY)
                return

            if result is None:
                logger.warning(
                    "Booking produced no result; no reply appended",
                    extra={"domain": request.domain.value},
                )
                return

            logger.info("Booking completed", extra={"domain": result.domain.value})
            self._conversation.append_assistant(
                result.display_text,
                OrderAttachment(order=result.payload),
            )

    async def _collect_suggestions(self, utterance: str) -> None:
        try:
            titles = await self.language.suggest_tasks(utterance)
        except Exception:
            logger.warning("Task suggestions unavailable", exc_info=True)
            return

        if titles:
            self._tasks.prepend_batch(
                titles,
                description=f"Generated from your conversation with {self.config.assistant_name}",
            )

    async def upload_file(
        self, name: str, data: bytes, mime_type: str = ""
    ) -> ExtractedFile | None:
        """Extract and register an uploaded file for the language service.

        Failures are reported through ``status.upload_error`` instead of raising.
        If a turn starts while the file is being extracted, the acknowledgment is
        appended once that turn has finished.

        Returns:
            The registered file, or ``None`` if the upload was rejected.

        Raises:
            SubmitInProgressError: If a message is being processed.
        """
        if self._status.composing:
            raise SubmitInProgressError("Cannot upload while a message is being processed")

        limit = self.config.files.max_upload_bytes
        if len(data) > limit:
            self._status.upload_error = f"File size must be less than {_format_size(limit)}."
            logger.warning(
                "Upload rejected: too large", extra={"file_name": name, "size": len(data)}
            )
            return None

        self._status.upload_error = None
        with self._status.hold(StatusFlag.UPLOADING_FILE):
            try:
                extracted = await asyncio.to_thread(self.extractor.extract, name, data, mime_type)
            except Exception as e:
                logger.warning("Upload failed", extra={"file_name": name}, exc_info=True)
                self._status.upload_error = str(e) or "Failed to process file"
                return None

            self.files.add(extracted)

        ack = (
            f"I've successfully processed \"{extracted.name}\" and can now reference its content "
            "in our conversation. Feel free to ask me questions about the document or request "
            "analysis of its contents."
        )
        if self._status.composing:
            self._deferred.append(ack)
        else:
            self._conversation.append_assistant(ack)
        return extracted

    def remove_file(self, name: str) -> bool:
        return self.files.remove(name)

    def clear_upload_error(self) -> None:
        self._status.upload_error = None
