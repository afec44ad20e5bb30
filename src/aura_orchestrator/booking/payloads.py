"""Typed order payloads, one shape per booking domain.

``OrderPayload`` is a discriminated union on ``domain``: validating a raw backend
response picks the model that owns that domain tag.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class _Record(BaseModel):
    """Immutable base for everything carried in an order attachment."""

    model_config = ConfigDict(frozen=True)


class OrderItem(_Record):
    name: str
    quantity: int = Field(default=1, ge=1)
    unit_price: float | None = None


class FoodOrder(_Record):
    domain: Literal["food", "restaurant", "fasterbook_food"]
    order_id: str
    vendor: str
    items: tuple[OrderItem, ...] = ()
    total: float | None = None
    currency: str = "USD"
    status: str = "confirmed"
    estimated_delivery: str | None = None


class TicketOrder(_Record):
    domain: Literal["ticket", "fasterbook_movie"]
    booking_id: str
    title: str
    venue: str | None = None
    show_time: str | None = None
    seats: tuple[str, ...] = ()
    total: float | None = None
    currency: str = "USD"
    status: str = "confirmed"


class BookingSummary(_Record):
    booking_id: str
    kind: str
    title: str
    status: str
    scheduled_for: str | None = None


class BookingList(_Record):
    domain: Literal["fasterbook_bookings"]
    bookings: tuple[BookingSummary, ...] = ()


class MenuItem(_Record):
    name: str
    price: float | None = None
    description: str | None = None
    available: bool = True


class MenuListing(_Record):
    domain: Literal["fasterbook_menu"]
    vendor: str
    items: tuple[MenuItem, ...] = ()


class HotelReservation(_Record):
    domain: Literal["hotel"]
    confirmation: str
    hotel: str
    check_in: str
    check_out: str
    guests: int = Field(default=1, ge=1)
    total: float | None = None
    currency: str = "USD"
    status: str = "confirmed"


class FlightReservation(_Record):
    domain: Literal["flight"]
    confirmation: str
    airline: str
    origin: str
    destination: str
    departure: str
    passengers: int = Field(default=1, ge=1)
    total: float | None = None
    currency: str = "USD"
    status: str = "confirmed"


class RideBooking(_Record):
    domain: Literal["ride"]
    ride_id: str
    pickup: str
    dropoff: str
    vehicle: str | None = None
    eta_minutes: int | None = None
    fare: float | None = None
    currency: str = "USD"
    status: str = "requested"


OrderPayload = Annotated[
    FoodOrder
    | TicketOrder
    | BookingList
    | MenuListing
    | HotelReservation
    | FlightReservation
    | RideBooking,
    Field(discriminator="domain"),
]

order_payload_adapter: TypeAdapter[OrderPayload] = TypeAdapter(OrderPayload)
