"""FastAPI app factory.

Endpoints are intentionally thin wrappers over one :class:`Orchestrator` session.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, UploadFile, status
from fastapi.middleware.cors import CORSMiddleware

from aura_orchestrator import __version__
from aura_orchestrator.conversation.tasks import TaskSuggestion
from aura_orchestrator.conversation.turns import Turn
from aura_orchestrator.core.config import AssistantConfig
from aura_orchestrator.core.orchestrator import Orchestrator, SubmitInProgressError
from aura_orchestrator.server.config import ServerSettings
from aura_orchestrator.server.models import (
    ApiFile,
    ApiStatus,
    SubmitRequest,
    SubmitResponse,
    TaskStatusUpdate,
)

logger = logging.getLogger(__name__)


def _build_orchestrator(settings: ServerSettings) -> Orchestrator:
    config = AssistantConfig()
    config.setup_logging()
    return Orchestrator.from_config(config, settings.session_user())


def create_app(orchestrator: Orchestrator | None = None) -> FastAPI:
    settings = ServerSettings()
    session = orchestrator or _build_orchestrator(settings)

    app = FastAPI(
        title="AURA Orchestrator",
        version=__version__,
        description="REST API over a single AURA conversation session.",
        openapi_url="/api/openapi.json",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.state.settings = settings
    app.state.orchestrator = session

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.parsed_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": __version__}

    @app.get("/api/messages", response_model=list[Turn])
    def list_messages() -> list[Turn]:
        return list(session.messages)

    @app.post("/api/messages", response_model=SubmitResponse)
    async def submit_message(req: SubmitRequest) -> SubmitResponse:
        if session.status.composing:
            raise HTTPException(status_code=409, detail="A message is already being processed")
        before = len(session.messages)
        try:
            await session.submit(req.text)
        except SubmitInProgressError as e:
            raise HTTPException(status_code=409, detail=str(e)) from e
        return SubmitResponse(turns=list(session.messages[before:]))

    @app.get("/api/tasks", response_model=list[TaskSuggestion])
    def list_tasks() -> list[TaskSuggestion]:
        return list(session.tasks)

    @app.patch("/api/tasks/{task_id}", response_model=TaskSuggestion)
    def update_task(task_id: str, req: TaskStatusUpdate) -> TaskSuggestion:
        try:
            return session.task_collector.update_status(task_id, req.status)
        except KeyError as e:
            raise HTTPException(status_code=404, detail="Task not found") from e

    @app.get("/api/status", response_model=ApiStatus)
    def get_status() -> ApiStatus:
        snap = session.status
        return ApiStatus(
            composing=snap.composing,
            generating_image=snap.generating_image,
            uploading_file=snap.uploading_file,
            upload_error=snap.upload_error,
        )

    @app.delete("/api/status/upload-error", status_code=status.HTTP_204_NO_CONTENT)
    def clear_upload_error() -> None:
        session.clear_upload_error()

    @app.get("/api/files", response_model=list[ApiFile])
    def list_files() -> list[ApiFile]:
        return [
            ApiFile(name=f.name, mime_type=f.mime_type, size=f.size, uploaded_at=f.uploaded_at)
            for f in session.uploaded_files
        ]

    @app.post("/api/files", response_model=ApiFile, status_code=status.HTTP_201_CREATED)
    async def upload_file(file: UploadFile) -> ApiFile:
        data = await file.read()
        try:
            extracted = await session.upload_file(
                file.filename or "upload",
                data,
                file.content_type or "",
            )
        except SubmitInProgressError as e:
            raise HTTPException(status_code=409, detail=str(e)) from e
        if extracted is None:
            raise HTTPException(
                status_code=400,
                detail=session.status.upload_error or "Failed to process file",
            )
        return ApiFile(
            name=extracted.name,
            mime_type=extracted.mime_type,
            size=extracted.size,
            uploaded_at=extracted.uploaded_at,
        )

    @app.delete("/api/files/{name}", status_code=status.HTTP_204_NO_CONTENT)
    def remove_file(name: str) -> None:
        if not session.remove_file(name):
            raise HTTPException(status_code=404, detail="File not found")

    return app
