"""Builds services for the views, each request getting fresh instances."""

from conference.services import ActivityService, EligibilityGuard, HotelService
from conference.stores.django_store import DjangoConferenceStore


def get_hotel_service() -> HotelService:
    store = DjangoConferenceStore()
    return HotelService(EligibilityGuard(store), store)


def get_activity_service() -> ActivityService:
    store = DjangoConferenceStore()
    return ActivityService(EligibilityGuard(store), store)
