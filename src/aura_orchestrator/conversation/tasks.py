"""Task suggestions derived from conversation turns."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class TaskStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"


class TaskSuggestion(BaseModel):
    id: str
    title: str
    status: TaskStatus = TaskStatus.PENDING
    description: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class TaskCollector:
    """Stack of suggestion batches.

    Each batch goes in front of everything collected so far while keeping its own
    order. Duplicate titles are kept as separate entries.
    """

    def __init__(self) -> None:
        self._tasks: list[TaskSuggestion] = []
        self._batches = 0

    def prepend_batch(self, titles: Iterable[str], description: str) -> list[TaskSuggestion]:
        """Create one pending suggestion per title and put the batch first.

        Args:
            titles: Suggestion titles in the order they should be displayed.
            description: Origin note stored on every suggestion.

        Returns:
            The created suggestions (empty if ``titles`` was empty).
        """
        stamp = time.time_ns() // 1_000_000
        self._batches += 1
        batch = [
            TaskSuggestion(
                id=f"task-{stamp}-{self._batches}-{index}",
                title=title,
                description=description,
            )
            for index, title in enumerate(titles)
        ]
        if batch:
            self._tasks[:0] = batch
            logger.info("Task suggestions collected", extra={"count": len(batch)})
        return batch

    def update_status(self, task_id: str, status: TaskStatus) -> TaskSuggestion:
        """Change the status of one suggestion.

        Used by the task-center surface only.

        Raises:
            KeyError: If no suggestion has ``task_id``.
        """
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                updated = task.model_copy(update={"status": status})
                self._tasks[index] = updated
                return updated
        raise KeyError(task_id)

    def snapshot(self) -> tuple[TaskSuggestion, ...]:
        return tuple(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)
