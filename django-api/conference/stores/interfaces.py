"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from conference.domain import (
    Activity,
    ActivityRegistration,
    Booking,
    Enrollment,
    Hotel,
    Ticket,
)


class DuplicateRegistrationError(Exception):
    """Raised by a store when a user already holds an activity registration."""

    def __init__(self, user_id: int) -> None:
        super().__init__(f"user {user_id} already has an activity registration")
        self.user_id = user_id


class UnknownActivityError(Exception):
    """Raised by a store when a registration references a missing activity."""

    def __init__(self, activity_id: int) -> None:
        super().__init__(f"activity {activity_id} does not exist")
        self.activity_id = activity_id


class EligibilityStore(ABC):
    """Reads the records that decide whether a user may use paid features."""

    @abstractmethod
    def find_enrollment_with_address_by_user(self, user_id: int) -> Enrollment | None:
        """Return the user's enrollment with its address, or None."""
        ...

    @abstractmethod
    def find_ticket_by_enrollment(self, enrollment_id: int) -> Ticket | None:
        """Return the enrollment's most recent ticket with its type, or None."""
        ...

    @abstractmethod
    def find_booking_by_user(self, user_id: int) -> Booking | None:
        """Return the user's room booking, or None."""
        ...


class HotelStore(ABC):
    """Interface for hotel catalog reads."""

    @abstractmethod
    def list_hotels(self) -> list[Hotel]:
        """Return all hotels without rooms, ordered by id."""
        ...

    @abstractmethod
    def get_hotel_with_rooms(self, hotel_id: int) -> Hotel | None:
        """Return a hotel with its rooms, or None if not found."""
        ...

    @abstractmethod
    def list_hotels_with_rooms_and_bookings(self) -> list[Hotel]:
        """Return all hotels, each room carrying its bookings."""
        ...


class ActivityStore(ABC):
    """Interface for activity catalog and registration persistence."""

    @abstractmethod
    def list_activities(self) -> list[Activity]:
        """Return all activities ordered by day, start time and id."""
        ...

    @abstractmethod
    def list_registrations_for_user(self, user_id: int) -> list[ActivityRegistration]:
        """Return the user's activity registrations."""
        ...

    @abstractmethod
    def activity_exists(self, activity_id: int) -> bool:
        """Check if an activity exists."""
        ...

    @abstractmethod
    def create_registration(self, user_id: int, activity_id: int) -> ActivityRegistration:
        """Persist a registration.

        Raises:
            DuplicateRegistrationError: If the user is already registered.
            UnknownActivityError: If the activity does not exist.
        """
        ...
