"""Unit tests for action dispatch."""

from __future__ import annotations

import pytest

from aura_orchestrator.booking.actions import AgenticAction
from aura_orchestrator.booking.dispatcher import ActionDispatcher, DispatchError, HandlerResult
from aura_orchestrator.booking.domains import DomainTag
from aura_orchestrator.booking.payloads import MenuItem, MenuListing, TicketOrder


def _menu() -> HandlerResult:
    return HandlerResult(
        display_text="Here is the menu.",
        payload=MenuListing(
            domain="fasterbook_menu",
            vendor="Green Bowl",
            items=[MenuItem(name="Falafel wrap", price=8.5)],
        ),
    )


@pytest.mark.asyncio
async def test_routes_to_the_action_domain(fake_handler) -> None:
    menu = fake_handler(_menu())
    other = fake_handler(None)
    dispatcher = ActionDispatcher(
        {DomainTag.FASTERBOOK_MENU: menu, DomainTag.FASTERBOOK_FOOD: other}
    )
    action = AgenticAction(domain=DomainTag.FASTERBOOK_MENU, action="show_menu")

    result = await dispatcher.dispatch(action, "what's on the menu?")

    assert result is not None
    assert result.domain is DomainTag.FASTERBOOK_MENU
    assert result.display_text == "Here is the menu."
    assert result.payload.vendor == "Green Bowl"
    assert menu.calls == [(action, "what's on the menu?")]
    assert other.calls == []


@pytest.mark.asyncio
async def test_missing_handler_returns_none() -> None:
    dispatcher = ActionDispatcher({})

    result = await dispatcher.dispatch(AgenticAction(domain=DomainTag.RIDE, action="book"), "ride")

    assert result is None


@pytest.mark.asyncio
async def test_handler_none_returns_none(fake_handler) -> None:
    dispatcher = ActionDispatcher({DomainTag.RIDE: fake_handler(None)})
    action = AgenticAction(domain=DomainTag.RIDE, action="book")

    assert await dispatcher.dispatch(action, "") is None


@pytest.mark.asyncio
async def test_handler_failure_is_wrapped(fake_handler) -> None:
    boom = ConnectionError("backend down")
    dispatcher = ActionDispatcher({DomainTag.HOTEL: fake_handler(boom)})

    with pytest.raises(DispatchError) as excinfo:
        await dispatcher.dispatch(AgenticAction(domain=DomainTag.HOTEL, action="book"), "hotel")

    assert excinfo.value.domain is DomainTag.HOTEL
    assert excinfo.value.__cause__ is boom
    assert "backend down" in str(excinfo.value)


@pytest.mark.asyncio
async def test_payload_for_another_domain_is_discarded(fake_handler) -> None:
    wrong = HandlerResult(
        display_text="Tickets booked.",
        payload=TicketOrder(domain="ticket", booking_id="b-1", title="Dune"),
    )
    dispatcher = ActionDispatcher({DomainTag.FASTERBOOK_MOVIE: fake_handler(wrong)})
    action = AgenticAction(domain=DomainTag.FASTERBOOK_MOVIE, action="book")

    assert await dispatcher.dispatch(action, "two for Dune") is None


@pytest.mark.asyncio
async def test_handler_called_once_per_dispatch(fake_handler) -> None:
    handler = fake_handler(ConnectionError("flaky"))
    dispatcher = ActionDispatcher({DomainTag.FOOD: handler})

    with pytest.raises(DispatchError):
        await dispatcher.dispatch(AgenticAction(domain=DomainTag.FOOD, action="order"), "pizza")

    assert len(handler.calls) == 1


def test_domains_lists_registered_handlers(fake_handler) -> None:
    dispatcher = ActionDispatcher({DomainTag.FOOD: fake_handler(None)})

    assert dispatcher.domains == frozenset({DomainTag.FOOD})
