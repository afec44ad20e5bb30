#!/usr/bin/env python3
"""Programmatic single-turn example.

This demonstrates using the orchestrator components directly:

* load settings from `.env` (``AURA_LLM_OPENAI_API_KEY`` at minimum)
* submit one message
* print the reply and any task suggestions

The user identity is passed as arguments (not read from `.env`).
"""

from __future__ import annotations

import argparse
import asyncio
from typing import Sequence

from aura_orchestrator.core import AssistantConfig, Orchestrator, SessionUser
from aura_orchestrator.logging import configure_logging


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Send one message to AURA (programmatic example).")
    parser.add_argument("--email", required=True, help="Email of the session user")
    parser.add_argument("--name", default=None, help="Full name used in the greeting")
    parser.add_argument("message", help="Text to send")
    return parser.parse_args(argv)


async def _run(orchestrator: Orchestrator, message: str) -> None:
    before = len(orchestrator.messages)
    await orchestrator.submit(message)

    for turn in orchestrator.messages[before:]:
        print(f"{turn.role.value}: {turn.text}")
        if turn.attachment is not None:
            print(f"  attachment: {turn.attachment.model_dump_json()}")

    for task in orchestrator.tasks:
        print(f"- [{task.status.value}] {task.title}")


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)

    config = AssistantConfig()
    configure_logging(config.log_level)

    user = SessionUser(user_id=args.email, email=args.email, full_name=args.name)
    orchestrator = Orchestrator.from_config(config, user)

    asyncio.run(_run(orchestrator, args.message))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
