"""Booking domains, structured actions and the dispatcher that routes them."""

from aura_orchestrator.booking.actions import AgenticAction
from aura_orchestrator.booking.dispatcher import (
    ActionDispatcher,
    DispatchError,
    DispatchResult,
    DomainHandler,
    HandlerResult,
)
from aura_orchestrator.booking.domains import DomainTag

__all__ = [
    "ActionDispatcher",
    "AgenticAction",
    "DispatchError",
    "DispatchResult",
    "DomainHandler",
    "DomainTag",
    "HandlerResult",
]
