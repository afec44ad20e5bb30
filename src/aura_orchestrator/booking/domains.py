"""Booking domains and the sigils the language service uses to request them."""

from __future__ import annotations

from enum import Enum


class DomainTag(str, Enum):
    FOOD = "food"
    TICKET = "ticket"
    FASTERBOOK_FOOD = "fasterbook_food"
    FASTERBOOK_MOVIE = "fasterbook_movie"
    FASTERBOOK_BOOKINGS = "fasterbook_bookings"
    FASTERBOOK_MENU = "fasterbook_menu"
    RESTAURANT = "restaurant"
    HOTEL = "hotel"
    FLIGHT = "flight"
    RIDE = "ride"


BOOKING_SIGILS: dict[str, DomainTag] = {
    "FOOD_BOOKING_REQUEST": DomainTag.FOOD,
    "TICKET_BOOKING_REQUEST": DomainTag.TICKET,
    "FASTERBOOK_FOOD_REQUEST": DomainTag.FASTERBOOK_FOOD,
    "FASTERBOOK_MOVIE_REQUEST": DomainTag.FASTERBOOK_MOVIE,
    "FASTERBOOK_BOOKINGS_REQUEST": DomainTag.FASTERBOOK_BOOKINGS,
    "FASTERBOOK_MENU_REQUEST": DomainTag.FASTERBOOK_MENU,
    "RESTAURANT_ORDER_REQUEST": DomainTag.RESTAURANT,
    "HOTEL_BOOKING_REQUEST": DomainTag.HOTEL,
    "FLIGHT_BOOKING_REQUEST": DomainTag.FLIGHT,
    "RIDE_BOOKING_REQUEST": DomainTag.RIDE,
}

# Prefix; the image prompt follows the colon.
IMAGE_GENERATION_SIGIL = "IMAGE_GENERATION:"
