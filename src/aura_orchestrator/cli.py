"""CLI entrypoint: an interactive chat session in the terminal.

Commands inside the session:
- ``/tasks``          list suggested tasks
- ``/upload <path>``  register a text file as context
- ``/files``          list registered files
- ``/quit``           leave the session
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import mimetypes
import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from aura_orchestrator import __version__
from aura_orchestrator.conversation.turns import ImageAttachment, OrderAttachment, Turn
from aura_orchestrator.core.config import AssistantConfig
from aura_orchestrator.core.orchestrator import Orchestrator
from aura_orchestrator.core.session import SessionUser
from aura_orchestrator.logging import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aura",
        description="AURA conversational assistant",
    )
    parser.add_argument("--version", action="version", version=f"aura-orchestrator {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    chat = subparsers.add_parser("chat", help="Start an interactive chat session")
    chat.add_argument("--email", default="user@localhost", help="Email of the session user")
    chat.add_argument("--name", default=None, help="Full name used in the greeting")
    chat.add_argument("--user-id", default="local", help="Identifier of the session user")

    return parser


def format_turn(turn: Turn) -> str:
    who = "you" if turn.role.value == "user" else "aura"
    lines = [f"[{turn.created_at:%H:%M:%S}] {who}> {turn.text}"]
    attachment = turn.attachment
    if isinstance(attachment, ImageAttachment):
        lines.append(f"    image: {attachment.url}")
    elif isinstance(attachment, OrderAttachment):
        order = attachment.order.model_dump(mode="json", exclude={"domain"})
        lines.append(f"    {attachment.order.domain} order: {order}")
    return "\n".join(lines)


def _print_new(orchestrator: Orchestrator, seen: int) -> int:
    messages = orchestrator.messages
    for turn in messages[seen:]:
        if turn.role.value == "assistant":
            print(format_turn(turn))
    return len(messages)


async def _upload(orchestrator: Orchestrator, raw_path: str) -> None:
    path = Path(raw_path).expanduser()
    try:
        data = path.read_bytes()
    except OSError as e:
        print(f"Cannot read {path}: {e}")
        return
    mime_type = mimetypes.guess_type(path.name)[0] or ""
    if await orchestrator.upload_file(path.name, data, mime_type) is None:
        print(f"Upload failed: {orchestrator.status.upload_error}")


async def run_chat(orchestrator: Orchestrator) -> int:
    seen = _print_new(orchestrator, 0)

    while True:
        try:
            line = await asyncio.to_thread(input, "you> ")
        except (EOFError, KeyboardInterrupt):
            print()
            return 0

        command = line.strip()
        if command in {"/quit", "/exit"}:
            return 0
        if command == "/tasks":
            for task in orchestrator.tasks:
                print(f"  [{task.status.value}] {task.title}")
            continue
        if command == "/files":
            for file in orchestrator.uploaded_files:
                print(f"  {file.name} ({file.size} bytes)")
            continue
        if command.startswith("/upload "):
            await _upload(orchestrator, command.removeprefix("/upload ").strip())
            seen = _print_new(orchestrator, seen)
            continue

        before = len(orchestrator.tasks)
        await orchestrator.submit(line)
        seen = _print_new(orchestrator, seen)
        added = len(orchestrator.tasks) - before
        if added:
            print(f"    ({added} new task suggestion(s); /tasks to list)")


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = AssistantConfig()
    except ValidationError as e:
        print(f"Invalid configuration:\n{e}", file=sys.stderr)
        return 2
    # Keep stdout for the conversation.
    configure_logging(config.log_level, debug=config.debug, stream=sys.stderr)

    if args.command == "chat":
        user = SessionUser(user_id=args.user_id, email=args.email, full_name=args.name)
        try:
            orchestrator = Orchestrator.from_config(config, user)
        except ValueError as e:
            logger.error("Could not start session", extra={"error": str(e)})
            print(f"Could not start session: {e}", file=sys.stderr)
            return 2
        return asyncio.run(run_chat(orchestrator))

    parser.error(f"Unknown command: {args.command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
