"""Conversation transcript: turns, attachments and the append-only store."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from aura_orchestrator.booking.payloads import OrderPayload
from aura_orchestrator.conversation.ids import next_turn_id
from aura_orchestrator.core.session import SessionUser

logger = logging.getLogger(__name__)


class Role(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


class ImageAttachment(BaseModel):
    """A generated image and the prompt it was generated from."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["image"] = "image"
    url: str
    prompt: str


class OrderAttachment(BaseModel):
    """Structured result of a booking, tagged with its domain via the payload."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["order"] = "order"
    order: OrderPayload


Attachment = Annotated[ImageAttachment | OrderAttachment, Field(discriminator="kind")]


class Turn(BaseModel):
    """One entry of the transcript. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=next_turn_id)
    role: Role
    text: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    attachment: Attachment | None = None

    @model_validator(mode="after")
    def _attachments_are_assistant_only(self) -> Turn:
        if self.attachment is not None and self.role is not Role.ASSISTANT:
            raise ValueError("only assistant turns may carry an attachment")
        return self


def greeting_for(user: SessionUser, assistant_name: str) -> str:
    """The opening assistant message for a session."""

    return (
        f"Hello {user.display_name}! I'm {assistant_name}, your Universal Reasoning Agent. "
        "I can help you think through complex problems, manage tasks, and understand the "
        "world around you. How can I assist you today?"
    )


class ConversationStore:
    """Append-only, time-ordered sequence of turns.

    There is no edit, delete, truncation or persistence here; consumers get
    read-only snapshots.
    """

    def __init__(self, turns: list[Turn] | None = None) -> None:
        self._turns: list[Turn] = list(turns or [])

    @classmethod
    def seeded(cls, user: SessionUser, assistant_name: str) -> ConversationStore:
        """Create a store holding only the session greeting."""

        greeting = Turn(role=Role.ASSISTANT, text=greeting_for(user, assistant_name))
        return cls([greeting])

    def append(self, turn: Turn) -> Turn:
        self._turns.append(turn)
        logger.debug(
            "Turn appended",
            extra={
                "turn_id": turn.id,
                "role": turn.role.value,
                "has_attachment": turn.attachment is not None,
            },
        )
        return turn

    def append_user(self, text: str) -> Turn:
        return self.append(Turn(role=Role.USER, text=text))

    def append_assistant(
        self, text: str, attachment: ImageAttachment | OrderAttachment | None = None
    ) -> Turn:
        return self.append(Turn(role=Role.ASSISTANT, text=text, attachment=attachment))

    def snapshot(self) -> tuple[Turn, ...]:
        return tuple(self._turns)

    def __len__(self) -> int:
        return len(self._turns)
