"""Pydantic models for the REST server."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from aura_orchestrator.conversation.tasks import TaskStatus
from aura_orchestrator.conversation.turns import Turn


class SubmitRequest(BaseModel):
    text: str = Field(max_length=20_000)


class SubmitResponse(BaseModel):
    turns: list[Turn] = Field(default_factory=list)


class TaskStatusUpdate(BaseModel):
    status: TaskStatus


class ApiStatus(BaseModel):
    composing: bool
    generating_image: bool
    uploading_file: bool
    upload_error: str | None = None


class ApiFile(BaseModel):
    name: str
    mime_type: str
    size: int
    uploaded_at: datetime
