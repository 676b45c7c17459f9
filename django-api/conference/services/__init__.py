from conference.services.activity_service import ActivityService, annotate_subscriptions
from conference.services.eligibility_guard import EligibilityGuard
from conference.services.hotel_service import HotelService

__all__ = [
    "ActivityService",
    "EligibilityGuard",
    "HotelService",
    "annotate_subscriptions",
]
