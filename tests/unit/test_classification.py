"""Unit tests for response classification."""

import pytest

from aura_orchestrator.booking.domains import BOOKING_SIGILS, DomainTag
from aura_orchestrator.llm.classification import (
    BookingRequest,
    ImageRequest,
    PlainText,
    classify,
)


def test_plain_text_is_returned_verbatim() -> None:
    response = "  Here is a thought.\n"

    assert classify(response) == PlainText(text=response)


def test_image_prefix_yields_prompt() -> None:
    assert classify("IMAGE_GENERATION:a red fox in snow") == ImageRequest(
        prompt="a red fox in snow"
    )


def test_image_prompt_is_trimmed() -> None:
    assert classify("  IMAGE_GENERATION:   lighthouse at dusk  \n") == ImageRequest(
        prompt="lighthouse at dusk"
    )


def test_image_prefix_only_matches_at_start() -> None:
    response = "You could say IMAGE_GENERATION:a cat"

    assert classify(response) == PlainText(text=response)


@pytest.mark.parametrize(("sigil", "domain"), sorted(BOOKING_SIGILS.items()))
def test_every_booking_sigil_maps_to_its_domain(sigil: str, domain: DomainTag) -> None:
    assert classify(sigil) == BookingRequest(domain=domain)


def test_booking_sigil_tolerates_surrounding_whitespace() -> None:
    assert classify("\nHOTEL_BOOKING_REQUEST  ") == BookingRequest(domain=DomainTag.HOTEL)


def test_sigil_inside_text_is_plain() -> None:
    response = "I can help. FOOD_BOOKING_REQUEST"

    assert classify(response) == PlainText(text=response)


def test_unknown_marker_is_plain() -> None:
    assert classify("SPACESHIP_BOOKING_REQUEST") == PlainText(text="SPACESHIP_BOOKING_REQUEST")


def test_sigils_are_case_sensitive() -> None:
    assert isinstance(classify("food_booking_request"), PlainText)


def test_every_domain_has_exactly_one_sigil() -> None:
    assert sorted(BOOKING_SIGILS.values()) == sorted(DomainTag)
