"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in conference/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import date, datetime, time

from conference.domain.value_objects import Money, TicketStatus


@dataclass(frozen=True)
class Address:
    """Postal address attached to an enrollment."""

    street: str
    number: str
    neighborhood: str
    city: str
    state: str
    postal_code: str
    detail: str = ""


@dataclass(frozen=True)
class Enrollment:
    """Domain representation of a user's enrollment."""

    id: int
    user_id: int
    name: str
    address: Address | None = None


@dataclass(frozen=True)
class TicketType:
    """Domain representation of a TicketType."""

    id: int
    name: str
    price: Money
    is_remote: bool
    includes_hotel: bool


@dataclass(frozen=True)
class Ticket:
    """Domain representation of a Ticket with its type embedded."""

    id: int
    enrollment_id: int
    status: TicketStatus
    ticket_type: TicketType


@dataclass(frozen=True)
class Booking:
    """A user's reservation of a room."""

    id: int
    user_id: int
    room_id: int
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Room:
    """Domain representation of a hotel Room.

    ``bookings`` is only populated by fetches that ask for it.
    """

    id: int
    hotel_id: int
    name: str
    capacity: int
    bookings: tuple[Booking, ...] = ()


@dataclass(frozen=True)
class Hotel:
    """Domain representation of a Hotel.

    ``rooms`` is only populated by fetches that ask for it.
    """

    id: int
    name: str
    image: str
    created_at: datetime
    updated_at: datetime
    rooms: tuple[Room, ...] = ()


@dataclass(frozen=True)
class Activity:
    """Domain representation of an Activity."""

    id: int
    name: str
    day: date
    starts_at: time
    ends_at: time
    place_id: int


@dataclass(frozen=True)
class ActivityRegistration:
    """A user's registration in an activity."""

    id: int
    user_id: int
    activity_id: int
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class ActivityListing:
    """An activity annotated with the requesting user's subscription."""

    activity: Activity
    user_subscribed: bool
