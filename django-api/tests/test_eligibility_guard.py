"""Unit tests for EligibilityGuard against the in-memory store.

Run with: pytest tests/test_eligibility_guard.py -v
"""

import pytest

from conference.domain import TicketStatus
from conference.domain.errors import (
    BookingNotFoundError,
    CannotListActivitiesError,
    CannotListHotelsError,
    EnrollmentNotFoundError,
)
from conference.services import EligibilityGuard


@pytest.fixture
def guard(store) -> EligibilityGuard:
    return EligibilityGuard(store)


class TestHotelAccess:
    def test_allowed_for_paid_in_person_hotel_ticket(self, guard, enroll):
        enroll()
        assert guard.check_hotel_access(1).allowed

    def test_no_enrollment_is_not_found(self, guard, store):
        result = guard.check_hotel_access(1)
        assert isinstance(result.error, EnrollmentNotFoundError)
        assert store.calls == ["enrollment"]

    def test_no_ticket_is_forbidden(self, guard, enroll):
        enroll(status=None)
        assert isinstance(guard.check_hotel_access(1).error, CannotListHotelsError)

    def test_reserved_ticket_is_forbidden(self, guard, enroll):
        enroll(status=TicketStatus.RESERVED)
        assert isinstance(guard.check_hotel_access(1).error, CannotListHotelsError)

    @pytest.mark.parametrize("status", list(TicketStatus))
    def test_remote_ticket_is_forbidden(self, guard, enroll, status):
        enroll(status=status, is_remote=True)
        assert isinstance(guard.check_hotel_access(1).error, CannotListHotelsError)

    def test_ticket_without_hotel_is_forbidden(self, guard, enroll):
        enroll(includes_hotel=False)
        assert isinstance(guard.check_hotel_access(1).error, CannotListHotelsError)

    def test_booking_is_not_required(self, guard, enroll, store):
        enroll(with_booking=False)
        assert guard.check_hotel_access(1).allowed
        assert "booking" not in store.calls

    def test_assert_raises_denial(self, guard):
        with pytest.raises(EnrollmentNotFoundError):
            guard.assert_hotel_access(1)


class TestActivityAccess:
    def test_allowed_with_booking(self, guard, enroll, store):
        enroll()
        assert guard.check_activity_access(1).allowed
        assert store.calls == ["enrollment", "ticket", "booking"]

    def test_no_enrollment_is_not_found(self, guard):
        assert isinstance(guard.check_activity_access(1).error, EnrollmentNotFoundError)

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"status": None},
            {"status": TicketStatus.RESERVED},
            {"is_remote": True},
            {"is_remote": True, "status": TicketStatus.RESERVED},
        ],
    )
    def test_unusable_ticket_is_forbidden(self, guard, enroll, store, kwargs):
        enroll(**kwargs)
        result = guard.check_activity_access(1)
        assert isinstance(result.error, CannotListActivitiesError)
        assert "booking" not in store.calls

    def test_ticket_without_hotel_is_allowed(self, guard, enroll):
        enroll(includes_hotel=False)
        assert guard.check_activity_access(1).allowed

    def test_missing_booking_is_not_found(self, guard, enroll):
        enroll(with_booking=False)
        assert isinstance(guard.check_activity_access(1).error, BookingNotFoundError)

    def test_assert_raises_denial(self, guard, enroll):
        enroll(status=TicketStatus.RESERVED)
        with pytest.raises(CannotListActivitiesError):
            guard.assert_activity_access(1)
