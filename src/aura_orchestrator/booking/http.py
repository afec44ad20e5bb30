"""HTTP-backed booking handlers.

Every domain is served by the same booking backend: actions are POSTed to
``<base_url>/<domain>/actions`` and the backend answers with a message and a typed
order. Domain business rules live on the backend.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import requests
from pydantic import ValidationError

from aura_orchestrator.booking.actions import AgenticAction
from aura_orchestrator.booking.dispatcher import DomainHandler, HandlerResult
from aura_orchestrator.booking.domains import DomainTag
from aura_orchestrator.booking.payloads import order_payload_adapter
from aura_orchestrator.core.config import BookingConfig

logger = logging.getLogger(__name__)


class BookingApiClient:
    """Small wrapper around a ``requests.Session`` for the booking backend."""

    def __init__(
        self,
        *,
        base_url: str,
        api_key: str | None = None,
        timeout_seconds: float = 30.0,
        session: requests.Session | None = None,
    ) -> None:
        if not base_url.strip():
            raise ValueError("Booking base URL is required")

        self._base_url = base_url.rstrip("/")
        self._timeout = timeout_seconds
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "Accept": "application/json",
                "User-Agent": "aura-orchestrator",
            }
        )
        if api_key:
            self._session.headers["Authorization"] = f"Bearer {api_key}"

    def _actions_url(self, domain: DomainTag) -> str:
        return f"{self._base_url}/{domain.value}/actions"

    def submit_action(self, action: AgenticAction, utterance: str) -> dict[str, Any] | None:
        """POST one action and return the decoded response body.

        Returns:
            The JSON object, or ``None`` for ``204 No Content``.

        Raises:
            requests.HTTPError: For non-2xx responses.
            ValueError: If the body is not a JSON object.
        """
        payload = {
            "domain": action.domain.value,
            "action": action.action,
            "parameters": action.parameters,
            "utterance": utterance,
        }
        resp = self._session.post(
            self._actions_url(action.domain), json=payload, timeout=self._timeout
        )
        if resp.status_code == 204:
            return None
        resp.raise_for_status()
        data = resp.json()
        if not isinstance(data, dict):
            raise ValueError("Unexpected booking response: expected a JSON object")
        return data

    def close(self) -> None:
        self._session.close()


class HttpBookingHandler:
    """Domain handler that delegates to the booking backend."""

    def __init__(self, client: BookingApiClient, domain: DomainTag) -> None:
        self._client = client
        self.domain = domain

    async def handle(self, action: AgenticAction, utterance: str) -> HandlerResult | None:
        data = await asyncio.to_thread(self._client.submit_action, action, utterance)
        if data is None or data.get("order") is None:
            return None

        order = dict(data["order"])
        order.setdefault("domain", self.domain.value)
        try:
            payload = order_payload_adapter.validate_python(order)
        except ValidationError as e:
            raise ValueError(f"Invalid {self.domain.value} order from booking backend") from e

        message = data.get("message")
        if not isinstance(message, str) or not message.strip():
            message = f"Your {self.domain.value.replace('_', ' ')} request has been processed."
        return HandlerResult(display_text=message, payload=payload)


def build_handlers(config: BookingConfig) -> dict[DomainTag, DomainHandler]:
    """Create one HTTP handler per domain, or none when no backend is configured."""

    if not config.base_url:
        logger.warning("No booking backend configured; booking requests will go unanswered")
        return {}

    client = BookingApiClient(
        base_url=config.base_url,
        api_key=config.api_key,
        timeout_seconds=config.timeout_seconds,
    )
    logger.info("Booking backend configured", extra={"base_url": config.base_url})
    return {domain: HttpBookingHandler(client, domain) for domain in DomainTag}
