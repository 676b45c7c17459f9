"""Pytest configuration and shared fixtures."""

import itertools
from dataclasses import replace
from datetime import date, datetime, time, timezone
from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from conference.domain import (
    Activity,
    ActivityRegistration,
    Address,
    Booking,
    Enrollment,
    Hotel,
    Money,
    Room,
    Ticket,
    TicketStatus,
    TicketType,
)
from conference.stores.interfaces import (
    ActivityStore,
    DuplicateRegistrationError,
    EligibilityStore,
    HotelStore,
    UnknownActivityError,
)

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


class InMemoryConferenceStore(EligibilityStore, HotelStore, ActivityStore):
    """Store double keeping everything in dicts and lists.

    ``calls`` records which eligibility records were fetched, in order.
    """

    def __init__(self) -> None:
        self.enrollments: dict[int, Enrollment] = {}
        self.tickets: dict[int, Ticket] = {}
        self.bookings: dict[int, Booking] = {}
        self.hotels: list[Hotel] = []
        self.activities: list[Activity] = []
        self.registrations: list[ActivityRegistration] = []
        self.calls: list[str] = []
        self._ids = itertools.count(1000)

    def next_id(self) -> int:
        return next(self._ids)

    def find_enrollment_with_address_by_user(self, user_id: int) -> Enrollment | None:
        self.calls.append("enrollment")
        return self.enrollments.get(user_id)

    def find_ticket_by_enrollment(self, enrollment_id: int) -> Ticket | None:
        self.calls.append("ticket")
        return self.tickets.get(enrollment_id)

    def find_booking_by_user(self, user_id: int) -> Booking | None:
        self.calls.append("booking")
        return self.bookings.get(user_id)

    def list_hotels(self) -> list[Hotel]:
        return [replace(hotel, rooms=()) for hotel in self.hotels]

    def get_hotel_with_rooms(self, hotel_id: int) -> Hotel | None:
        for hotel in self.hotels:
            if hotel.id == hotel_id:
                rooms = tuple(replace(room, bookings=()) for room in hotel.rooms)
                return replace(hotel, rooms=rooms)
        return None

    def list_hotels_with_rooms_and_bookings(self) -> list[Hotel]:
        return list(self.hotels)

    def list_activities(self) -> list[Activity]:
        return list(self.activities)

    def list_registrations_for_user(self, user_id: int) -> list[ActivityRegistration]:
        return [r for r in self.registrations if r.user_id == user_id]

    def activity_exists(self, activity_id: int) -> bool:
        return any(activity.id == activity_id for activity in self.activities)

    def create_registration(self, user_id: int, activity_id: int) -> ActivityRegistration:
        if any(r.user_id == user_id for r in self.registrations):
            raise DuplicateRegistrationError(user_id)
        if not any(activity.id == activity_id for activity in self.activities):
            raise UnknownActivityError(activity_id)
        registration = ActivityRegistration(
            id=self.next_id(),
            user_id=user_id,
            activity_id=activity_id,
            created_at=NOW,
            updated_at=NOW,
        )
        self.registrations.append(registration)
        return registration


@pytest.fixture
def store() -> InMemoryConferenceStore:
    return InMemoryConferenceStore()


@pytest.fixture
def enroll(store):
    """Give a user an enrollment, optionally a ticket and a booking."""

    def _enroll(
        user_id: int = 1,
        *,
        status: TicketStatus | None = TicketStatus.PAID,
        is_remote: bool = False,
        includes_hotel: bool = True,
        with_booking: bool = True,
    ) -> Enrollment:
        enrollment = Enrollment(
            id=store.next_id(),
            user_id=user_id,
            name="Ada Lovelace",
            address=Address(
                street="Main Street",
                number="42",
                neighborhood="Centre",
                city="London",
                state="LDN",
                postal_code="12345",
            ),
        )
        store.enrollments[user_id] = enrollment
        if status is not None:
            store.tickets[enrollment.id] = Ticket(
                id=store.next_id(),
                enrollment_id=enrollment.id,
                status=status,
                ticket_type=TicketType(
                    id=store.next_id(),
                    name="Full pass",
                    price=Money(Decimal("250.00")),
                    is_remote=is_remote,
                    includes_hotel=includes_hotel,
                ),
            )
        if with_booking:
            store.bookings[user_id] = Booking(
                id=store.next_id(),
                user_id=user_id,
                room_id=1,
                created_at=NOW,
                updated_at=NOW,
            )
        return enrollment

    return _enroll


@pytest.fixture
def add_activity(store):
    def _add_activity(name: str = "Keynote", day: date = date(2024, 5, 2)) -> Activity:
        activity = Activity(
            id=store.next_id(),
            name=name,
            day=day,
            starts_at=time(9, 0),
            ends_at=time(10, 0),
            place_id=1,
        )
        store.activities.append(activity)
        return activity

    return _add_activity


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def user(django_user_model):
    return django_user_model.objects.create_user(username="attendee", password="secret")


@pytest.fixture
def auth_client(api_client: APIClient, user) -> APIClient:
    api_client.force_authenticate(user=user)
    return api_client


@pytest.fixture
def make_attendee():
    """Create ORM rows for an enrollment, its ticket and optionally a room booking."""
    from conference import models

    def _make_attendee(
        user,
        *,
        status: str | None = "PAID",
        is_remote: bool = False,
        includes_hotel: bool = True,
        with_booking: bool = True,
    ):
        enrollment = models.Enrollment.objects.create(user=user, name="Ada Lovelace")
        models.Address.objects.create(
            enrollment=enrollment,
            street="Main Street",
            number="42",
            neighborhood="Centre",
            city="London",
            state="LDN",
            postal_code="12345",
        )
        if status is not None:
            ticket_type = models.TicketType.objects.create(
                name="Full pass",
                price=Decimal("250.00"),
                is_remote=is_remote,
                includes_hotel=includes_hotel,
            )
            models.Ticket.objects.create(
                enrollment=enrollment, ticket_type=ticket_type, status=status
            )
        if with_booking:
            hotel = models.Hotel.objects.create(name="Driven Resort")
            room = models.Room.objects.create(hotel=hotel, name="101", capacity=2)
            models.Booking.objects.create(user=user, room=room)
        return enrollment

    return _make_attendee


@pytest.fixture
def make_activity():
    from conference import models

    def _make_activity(name: str = "Keynote", place_name: str = "Main Hall"):
        place, _ = models.Place.objects.get_or_create(name=place_name)
        return models.Activity.objects.create(
            name=name,
            day=date(2024, 5, 2),
            starts_at=time(9, 0),
            ends_at=time(10, 0),
            place=place,
        )

    return _make_activity
