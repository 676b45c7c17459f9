from conference.handlers.views import (
    ActivityListView,
    HotelDetailView,
    HotelListView,
    HotelRoomsListView,
)

__all__ = [
    "ActivityListView",
    "HotelDetailView",
    "HotelListView",
    "HotelRoomsListView",
]
