"""Classify raw language-service replies into handling paths.

Classification is total: anything that is not a recognized sigil is plain text.
"""

from __future__ import annotations

from dataclasses import dataclass

from aura_orchestrator.booking.domains import BOOKING_SIGILS, IMAGE_GENERATION_SIGIL, DomainTag


@dataclass(frozen=True, slots=True)
class PlainText:
    text: str


@dataclass(frozen=True, slots=True)
class ImageRequest:
    prompt: str


@dataclass(frozen=True, slots=True)
class BookingRequest:
    domain: DomainTag


Classification = PlainText | ImageRequest | BookingRequest


def classify(response: str) -> Classification:
    candidate = response.strip()
    if candidate.startswith(IMAGE_GENERATION_SIGIL):
        return ImageRequest(prompt=candidate[len(IMAGE_GENERATION_SIGIL) :].strip())

    domain = BOOKING_SIGILS.get(candidate)
    if domain is not None:
        return BookingRequest(domain=domain)

    return PlainText(text=response)
