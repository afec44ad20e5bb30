"""Route structured actions to the booking domain that owns them."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol

from aura_orchestrator.booking.actions import AgenticAction
from aura_orchestrator.booking.domains import DomainTag
from aura_orchestrator.booking.payloads import OrderPayload

logger = logging.getLogger(__name__)


class DispatchError(RuntimeError):
    """A domain handler failed while handling an action."""

    def __init__(self, domain: DomainTag, message: str) -> None:
        super().__init__(f"{domain.value}: {message}")
        self.domain = domain


@dataclass(frozen=True, slots=True)
class HandlerResult:
    """What a domain handler reports back."""

    display_text: str
    payload: OrderPayload


@dataclass(frozen=True, slots=True)
class DispatchResult:
    """A handler result normalized for the transcript."""

    display_text: str
    domain: DomainTag
    payload: OrderPayload


class DomainHandler(Protocol):
    """One booking domain. Returns ``None`` when it has nothing to show."""

    async def handle(self, action: AgenticAction, utterance: str) -> HandlerResult | None: ...


class ActionDispatcher:
    """Call exactly one domain handler per action, without retries."""

    def __init__(self, handlers: Mapping[DomainTag, DomainHandler]) -> None:
        self._handlers = dict(handlers)

    @property
    def domains(self) -> frozenset[DomainTag]:
        return frozenset(self._handlers)

    async def dispatch(self, action: AgenticAction, utterance: str) -> DispatchResult | None:
        """Hand ``action`` to its domain handler.

        Args:
            action: Structured action; ``action.domain`` selects the handler.
            utterance: The user's original text, forwarded unchanged.

        Returns:
            The normalized result, or ``None`` when there is no handler for the
            domain or the handler produced nothing usable.

        Raises:
            DispatchError: If the handler raised.
        """
        handler = self._handlers.get(action.domain)
        if handler is None:
            logger.error("No handler registered for domain", extra={"domain": action.domain.value})
            return None

        logger.info(
            "Dispatching action",
            extra={"domain": action.domain.value, "action": action.action},
        )
        try:
            result = await handler.handle(action, utterance)
        except Exception as e:
            raise DispatchError(action.domain, str(e) or type(e).__name__) from e

        if result is None:
            logger.info("Handler returned no result", extra={"domain": action.domain.value})
            return None

        if result.payload.domain != action.domain.value:
            logger.error(
                "Handler returned a payload for another domain",
                extra={"domain": action.domain.value, "payload_domain": result.payload.domain},
            )
            return None

        return DispatchResult(
            display_text=result.display_text,
            domain=action.domain,
            payload=result.payload,
        )
