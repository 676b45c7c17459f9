"""Django ORM implementation of the conference stores."""

from django.db import IntegrityError, transaction

from conference import models
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


def _to_address(row: models.Address) -> Address:
    return Address(
        street=row.street,
        number=row.number,
        neighborhood=row.neighborhood,
        city=row.city,
        state=row.state,
        postal_code=row.postal_code,
        detail=row.detail,
    )


def _to_booking(row: models.Booking) -> Booking:
    return Booking(
        id=row.id,
        user_id=row.user_id,
        room_id=row.room_id,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _to_room(row: models.Room, with_bookings: bool = False) -> Room:
    bookings = tuple(_to_booking(b) for b in row.bookings.all()) if with_bookings else ()
    return Room(
        id=row.id,
        hotel_id=row.hotel_id,
        name=row.name,
        capacity=row.capacity,
        bookings=bookings,
    )


def _to_hotel(row: models.Hotel, rooms: tuple[Room, ...] = ()) -> Hotel:
    return Hotel(
        id=row.id,
        name=row.name,
        image=row.image,
        created_at=row.created_at,
        updated_at=row.updated_at,
        rooms=rooms,
    )


def _to_activity(row: models.Activity) -> Activity:
    return Activity(
        id=row.id,
        name=row.name,
        day=row.day,
        starts_at=row.starts_at,
        ends_at=row.ends_at,
        place_id=row.place_id,
    )


def _to_registration(row: models.UserActivity) -> ActivityRegistration:
    return ActivityRegistration(
        id=row.id,
        user_id=row.user_id,
        activity_id=row.activity_id,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class DjangoConferenceStore(EligibilityStore, HotelStore, ActivityStore):
    """Relational store backed by the Django ORM."""

    def find_enrollment_with_address_by_user(self, user_id: int) -> Enrollment | None:
        row = (
            models.Enrollment.objects.select_related("address")
            .filter(user_id=user_id)
            .first()
        )
        if row is None:
            return None
        try:
            address = _to_address(row.address)
        except models.Address.DoesNotExist:
            address = None
        return Enrollment(id=row.id, user_id=row.user_id, name=row.name, address=address)

    def find_ticket_by_enrollment(self, enrollment_id: int) -> Ticket | None:
        row = (
            models.Ticket.objects.select_related("ticket_type")
            .filter(enrollment_id=enrollment_id)
            .order_by("-created_at", "-id")
            .first()
        )
        if row is None:
            return None
        ticket_type = row.ticket_type
        return Ticket(
            id=row.id,
            enrollment_id=row.enrollment_id,
            status=TicketStatus(row.status),
            ticket_type=TicketType(
                id=ticket_type.id,
                name=ticket_type.name,
                price=Money(ticket_type.price),
                is_remote=ticket_type.is_remote,
                includes_hotel=ticket_type.includes_hotel,
            ),
        )

    def find_booking_by_user(self, user_id: int) -> Booking | None:
        row = models.Booking.objects.filter(user_id=user_id).order_by("-id").first()
        return _to_booking(row) if row is not None else None

    def list_hotels(self) -> list[Hotel]:
        return [_to_hotel(row) for row in models.Hotel.objects.all()]

    def get_hotel_with_rooms(self, hotel_id: int) -> Hotel | None:
        row = (
            models.Hotel.objects.prefetch_related("rooms").filter(id=hotel_id).first()
        )
        if row is None:
            return None
        return _to_hotel(row, rooms=tuple(_to_room(r) for r in row.rooms.all()))

    def list_hotels_with_rooms_and_bookings(self) -> list[Hotel]:
        rows = models.Hotel.objects.prefetch_related("rooms__bookings")
        return [
            _to_hotel(
                row,
                rooms=tuple(_to_room(r, with_bookings=True) for r in row.rooms.all()),
            )
            for row in rows
        ]

    def list_activities(self) -> list[Activity]:
        return [_to_activity(row) for row in models.Activity.objects.all()]

    def list_registrations_for_user(self, user_id: int) -> list[ActivityRegistration]:
        rows = models.UserActivity.objects.filter(user_id=user_id).order_by("id")
        return [_to_registration(row) for row in rows]

    def activity_exists(self, activity_id: int) -> bool:
        return models.Activity.objects.filter(id=activity_id).exists()

    def create_registration(self, user_id: int, activity_id: int) -> ActivityRegistration:
        # The savepoint keeps a failed insert from breaking an outer transaction.
        try:
            with transaction.atomic():
                row = models.UserActivity.objects.create(
                    user_id=user_id, activity_id=activity_id
                )
        except IntegrityError as exc:
            if models.UserActivity.objects.filter(user_id=user_id).exists():
                raise DuplicateRegistrationError(user_id) from exc
            if not self.activity_exists(activity_id):
                raise UnknownActivityError(activity_id) from exc
            raise
        return _to_registration(row)
