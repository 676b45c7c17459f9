"""Activity catalog service."""

import logging
from collections.abc import Iterable

from conference.domain.errors import ActivityAlreadyRegisteredError, InvalidActivityError
from conference.domain.models import Activity, ActivityListing, ActivityRegistration
from conference.services.eligibility_guard import EligibilityGuard
from conference.stores.interfaces import (
    ActivityStore,
    DuplicateRegistrationError,
    UnknownActivityError,
)

logger = logging.getLogger(__name__)


def annotate_subscriptions(
    activities: Iterable[Activity], registrations: Iterable[ActivityRegistration]
) -> list[ActivityListing]:
    """Mark each activity with whether one of the registrations points at it."""
    subscribed = {registration.activity_id for registration in registrations}
    return [
        ActivityListing(activity=activity, user_subscribed=activity.id in subscribed)
        for activity in activities
    ]


class ActivityService:
    """Service for listing and registering in activities."""

    def __init__(self, guard: EligibilityGuard, store: ActivityStore) -> None:
        self._guard = guard
        self._store = store

    def get_activities(self, user_id: int) -> list[ActivityListing]:
        """Return the whole catalog annotated with the user's subscriptions.

        Raises:
            EnrollmentNotFoundError: If the user has no enrollment.
            CannotListActivitiesError: If the ticket is missing, reserved or remote.
            BookingNotFoundError: If the user has no booking.
        """
        self._guard.assert_activity_access(user_id)
        activities = self._store.list_activities()
        registrations = self._store.list_registrations_for_user(user_id)
        return annotate_subscriptions(activities, registrations)

    def create_user_activity(self, user_id: int, activity_id: int) -> ActivityRegistration:
        """Register the user in an activity.

        A user holds at most one registration in total.

        Raises:
            EnrollmentNotFoundError: If the user has no enrollment.
            CannotListActivitiesError: If the ticket is missing, reserved or remote.
            BookingNotFoundError: If the user has no booking.
            InvalidActivityError: If the activity does not exist.
            ActivityAlreadyRegisteredError: If the user is already registered.
        """
        self._guard.assert_activity_access(user_id)
        if not self._store.activity_exists(activity_id):
            raise InvalidActivityError()

        try:
            registration = self._store.create_registration(user_id, activity_id)
        except DuplicateRegistrationError as exc:
            logger.warning("User %s already holds an activity registration", user_id)
            raise ActivityAlreadyRegisteredError() from exc
        except UnknownActivityError as exc:
            raise InvalidActivityError() from exc

        logger.info("User %s registered in activity %s", user_id, activity_id)
        return registration
