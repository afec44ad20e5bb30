"""Unit tests for file uploads."""

from __future__ import annotations

import asyncio
import threading

import pytest

from aura_orchestrator.conversation.turns import Role
from aura_orchestrator.core.orchestrator import SubmitInProgressError
from aura_orchestrator.llm.files import (
    ExtractedFile,
    FileExtractionError,
    TextFileExtractor,
    UploadedFileRegistry,
)


@pytest.mark.asyncio
async def test_text_upload_is_registered_and_acknowledged(make_orchestrator, fake_language) -> None:
    orch = make_orchestrator(fake_language())

    extracted = await orch.upload_file("notes.md", b"# Trip\nLisbon in May", "text/markdown")

    assert extracted is not None
    assert extracted.content == "# Trip\nLisbon in May"
    assert [f.name for f in orch.uploaded_files] == ["notes.md"]
    last = orch.messages[-1]
    assert last.role is Role.ASSISTANT
    assert last.text.startswith("I've successfully processed \"notes.md\"")
    status = orch.status
    assert status.uploading_file is False
    assert status.upload_error is None


@pytest.mark.asyncio
async def test_oversized_upload_is_rejected(make_orchestrator, fake_language) -> None:
    orch = make_orchestrator(fake_language())
    before = orch.messages

    result = await orch.upload_file("big.txt", b"x" * 2048, "text/plain")

    assert result is None
    assert orch.status.upload_error == "File size must be less than 1KB."
    assert orch.uploaded_files == ()
    assert orch.messages == before


@pytest.mark.asyncio
async def test_binary_upload_reports_error(make_orchestrator, fake_language) -> None:
    orch = make_orchestrator(fake_language())

    result = await orch.upload_file("photo.png", b"\x89PNG\r\n\x00\x00", "image/png")

    assert result is None
    status = orch.status
    assert status.upload_error == "Unsupported file type: photo.png"
    assert status.uploading_file is False


@pytest.mark.asyncio
async def test_successful_upload_clears_previous_error(make_orchestrator, fake_language) -> None:
    orch = make_orchestrator(fake_language())
    await orch.upload_file("photo.png", b"\x00", "image/png")

    await orch.upload_file("notes.txt", b"hello", "text/plain")

    assert orch.status.upload_error is None


@pytest.mark.asyncio
async def test_uploading_flag_is_set_during_extraction(make_orchestrator, fake_language) -> None:
    orch = make_orchestrator(fake_language())
    observed: list[bool] = []

    class RecordingExtractor(TextFileExtractor):
        def extract(self, name: str, data: bytes, mime_type: str) -> ExtractedFile:
            observed.append(orch.status.uploading_file)
            return super().extract(name, data, mime_type)

    orch.extractor = RecordingExtractor()
    await orch.upload_file("a.txt", b"a", "")

    assert observed == [True]
    assert orch.status.uploading_file is False


@pytest.mark.asyncio
async def test_remove_and_clear_error(make_orchestrator, fake_language) -> None:
    orch = make_orchestrator(fake_language())
    await orch.upload_file("a.txt", b"a", "")
    await orch.upload_file("b.bin", b"\x00", "")

    assert orch.remove_file("a.txt") is True
    assert orch.remove_file("a.txt") is False
    orch.clear_upload_error()

    assert orch.uploaded_files == ()
    assert orch.status.upload_error is None


def test_extractor_strips_bom_and_defaults_mime() -> None:
    extracted = TextFileExtractor().extract("a.csv", "\ufeffx,y\n1,2".encode(), "")

    assert extracted.content == "x,y\n1,2"
    assert extracted.mime_type == "text/plain"
    assert extracted.size == len("\ufeffx,y\n1,2".encode())


def test_extractor_rejects_invalid_utf8() -> None:
    with pytest.raises(FileExtractionError, match="Unsupported file type"):
        TextFileExtractor().extract("x.txt", b"\xff\xfe\xfa", "text/plain")


def test_registry_replaces_same_name_and_renders_context() -> None:
    registry = UploadedFileRegistry()
    registry.add(ExtractedFile(name="a.txt", mime_type="text/plain", size=3, content="old"))
    registry.add(ExtractedFile(name="a.txt", mime_type="text/plain", size=3, content="new"))
    registry.add(ExtractedFile(name="b.txt", mime_type="text/plain", size=10, content="0123456789"))

    block = registry.context_block(max_chars_per_file=4)

    assert len(registry) == 2
    assert '--- File: "a.txt" (text/plain) ---\nnew' in block
    assert "0123\n[truncated]" in block
    assert "old" not in block


@pytest.mark.asyncio
async def test_size_limit_message_uses_megabytes(make_orchestrator, fake_language) -> None:
    orch = make_orchestrator(fake_language())
    orch.config.files.max_upload_bytes = 2 * 1024 * 1024

    await orch.upload_file("huge.txt", b"x" * (2 * 1024 * 1024 + 1), "text/plain")

    assert orch.status.upload_error == "File size must be less than 2MB."


@pytest.mark.asyncio
async def test_upload_is_rejected_while_composing(make_orchestrator, fake_language) -> None:
    gate = asyncio.Event()

    class SlowLanguage(fake_language):
        async def complete(self, text: str) -> str:
            await gate.wait()
            return await super().complete(text)

    orch = make_orchestrator(SlowLanguage(reply="Answer"))
    turn = asyncio.create_task(orch.submit("question"))
    while not orch.status.composing:
        await asyncio.sleep(0)

    with pytest.raises(SubmitInProgressError):
        await orch.upload_file("notes.txt", b"hello", "text/plain")

    gate.set()
    await turn

    assert [t.text for t in orch.messages[1:]] == ["question", "Answer"]
    assert orch.uploaded_files == ()
    assert orch.status.uploading_file is False


@pytest.mark.asyncio
async def test_acknowledgment_waits_for_a_turn_started_mid_upload(
    make_orchestrator, fake_language
) -> None:
    extracting = threading.Event()
    release_extract = threading.Event()
    gate = asyncio.Event()

    class SlowExtractor(TextFileExtractor):
        def extract(self, name: str, data: bytes, mime_type: str) -> ExtractedFile:
            extracting.set()
            release_extract.wait(timeout=5)
            return super().extract(name, data, mime_type)

    class SlowLanguage(fake_language):
        async def complete(self, text: str) -> str:
            await gate.wait()
            return await super().complete(text)

    orch = make_orchestrator(SlowLanguage(reply="Answer"))
    orch.extractor = SlowExtractor()

    upload = asyncio.create_task(orch.upload_file("notes.txt", b"hello", "text/plain"))
    while not extracting.is_set():
        await asyncio.sleep(0.001)
    turn = asyncio.create_task(orch.submit("question"))
    while not orch.status.composing:
        await asyncio.sleep(0)

    release_extract.set()
    await upload
    gate.set()
    await turn

    texts = [t.text for t in orch.messages[1:]]
    assert texts[:2] == ["question", "Answer"]
    assert texts[2].startswith("I've successfully processed \"notes.txt\"")
    assert len(texts) == 3
