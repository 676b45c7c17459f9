"""Access checks shared by the hotel and activity services.

The guard only reads. Each check fetches records in order and stops at the
first failing rule, returning a tagged ``Eligibility`` rather than raising.
"""

import logging

from conference.domain.eligibility import (
    ALLOWED,
    Eligibility,
    ticket_grants_activities,
    ticket_grants_hotel,
)
from conference.domain.errors import (
    BookingNotFoundError,
    CannotListActivitiesError,
    CannotListHotelsError,
    DomainError,
    EnrollmentNotFoundError,
)
from conference.stores.interfaces import EligibilityStore

logger = logging.getLogger(__name__)


class EligibilityGuard:
    """Decides whether a user may use hotel or activity features."""

    def __init__(self, store: EligibilityStore) -> None:
        self._store = store

    def check_hotel_access(self, user_id: int) -> Eligibility:
        enrollment = self._store.find_enrollment_with_address_by_user(user_id)
        if enrollment is None:
            return self._deny(user_id, EnrollmentNotFoundError())

        ticket = self._store.find_ticket_by_enrollment(enrollment.id)
        if not ticket_grants_hotel(ticket):
            return self._deny(user_id, CannotListHotelsError())

        return ALLOWED

    def check_activity_access(self, user_id: int) -> Eligibility:
        enrollment = self._store.find_enrollment_with_address_by_user(user_id)
        if enrollment is None:
            return self._deny(user_id, EnrollmentNotFoundError())

        ticket = self._store.find_ticket_by_enrollment(enrollment.id)
        if not ticket_grants_activities(ticket):
            return self._deny(user_id, CannotListActivitiesError())

        if self._store.find_booking_by_user(user_id) is None:
            return self._deny(user_id, BookingNotFoundError())

        return ALLOWED

    def assert_hotel_access(self, user_id: int) -> None:
        """Raise the denial error if the user may not use hotel features."""
        self.check_hotel_access(user_id).raise_for_denial()

    def assert_activity_access(self, user_id: int) -> None:
        """Raise the denial error if the user may not use activity features."""
        self.check_activity_access(user_id).raise_for_denial()

    @staticmethod
    def _deny(user_id: int, error: DomainError) -> Eligibility:
        logger.info("Access denied for user %s: %s", user_id, error.code.value)
        return Eligibility(error=error)
