"""Hotel catalog service.

Every operation re-runs the hotel eligibility check before reading.
"""

from conference.domain.errors import HotelNotFoundError
from conference.domain.models import Hotel
from conference.services.eligibility_guard import EligibilityGuard
from conference.stores.interfaces import HotelStore


class HotelService:
    """Service for hotel catalog operations."""

    def __init__(self, guard: EligibilityGuard, store: HotelStore) -> None:
        self._guard = guard
        self._store = store

    def get_hotels(self, user_id: int) -> list[Hotel]:
        """Return all hotels, without rooms.

        Raises:
            EnrollmentNotFoundError: If the user has no enrollment.
            CannotListHotelsError: If the user's ticket does not grant hotel access.
        """
        self._guard.assert_hotel_access(user_id)
        return self._store.list_hotels()

    def get_hotel_with_rooms(self, user_id: int, hotel_id: int) -> Hotel:
        """Return one hotel with its rooms.

        Raises:
            EnrollmentNotFoundError: If the user has no enrollment.
            CannotListHotelsError: If the user's ticket does not grant hotel access.
            HotelNotFoundError: If the hotel does not exist.
        """
        self._guard.assert_hotel_access(user_id)
        hotel = self._store.get_hotel_with_rooms(hotel_id)
        if hotel is None:
            raise HotelNotFoundError()
        return hotel

    def get_all_hotels_with_rooms(self, user_id: int) -> list[Hotel]:
        """Return all hotels with rooms and each room's bookings."""
        self._guard.assert_hotel_access(user_id)
        return self._store.list_hotels_with_rooms_and_bookings()
