"""Conversation transcript and task suggestions."""

from aura_orchestrator.conversation.tasks import TaskCollector, TaskStatus, TaskSuggestion
from aura_orchestrator.conversation.turns import (
    ConversationStore,
    ImageAttachment,
    OrderAttachment,
    Role,
    Turn,
)

__all__ = [
    "ConversationStore",
    "ImageAttachment",
    "OrderAttachment",
    "Role",
    "TaskCollector",
    "TaskStatus",
    "TaskSuggestion",
    "Turn",
]
