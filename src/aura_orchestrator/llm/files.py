"""Uploaded files the language service may reference as context."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol

logger = logging.getLogger(__name__)


class FileExtractionError(ValueError):
    """Text could not be extracted from an uploaded file."""


@dataclass(frozen=True, slots=True)
class ExtractedFile:
    name: str
    mime_type: str
    size: int
    content: str
    uploaded_at: datetime = field(default_factory=lambda: datetime.now(UTC))


class FileExtractor(Protocol):
    def extract(self, name: str, data: bytes, mime_type: str) -> ExtractedFile: ...


class TextFileExtractor:
    """Accepts UTF-8 text files; anything binary is rejected."""

    def extract(self, name: str, data: bytes, mime_type: str) -> ExtractedFile:
        if b"\x00" in data:
            raise FileExtractionError(f"Unsupported file type: {name}")
        try:
            content = data.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise FileExtractionError(f"Unsupported file type: {name}") from e
        return ExtractedFile(
            name=name,
            mime_type=mime_type or "text/plain",
            size=len(data),
            content=content,
        )


class UploadedFileRegistry:
    """Files keyed by name; re-uploading a name replaces the earlier file."""

    def __init__(self) -> None:
        self._files: dict[str, ExtractedFile] = {}

    def add(self, file: ExtractedFile) -> None:
        self._files[file.name] = file
        logger.info("File registered", extra={"file_name": file.name, "size": file.size})

    def remove(self, name: str) -> bool:
        removed = self._files.pop(name, None) is not None
        if removed:
            logger.info("File removed", extra={"file_name": name})
        return removed

    def snapshot(self) -> tuple[ExtractedFile, ...]:
        return tuple(self._files.values())

    def __iter__(self) -> Iterator[ExtractedFile]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        return len(self._files)

    def context_block(self, max_chars_per_file: int) -> str:
        """Render every file as a labelled section for a system prompt."""

        sections = []
        for file in self._files.values():
            content = file.content
            if len(content) > max_chars_per_file:
                content = content[:max_chars_per_file] + "\n[truncated]"
            sections.append(f'--- File: "{file.name}" ({file.mime_type}) ---\n{content}')
        return "\n\n".join(sections)
