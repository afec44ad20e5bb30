"""FastAPI server adapter for aura-orchestrator.

This module exposes a REST API over a single orchestrator session.

Design intent:
- Keep conversation logic in `aura_orchestrator.core.*`
- Keep server-specific concerns (routing, CORS, request models) here
"""

from __future__ import annotations

__all__ = ["create_app"]

from aura_orchestrator.server.app import create_app
