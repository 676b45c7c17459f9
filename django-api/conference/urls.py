from django.urls import path

from conference.handlers import (
    ActivityListView,
    HotelDetailView,
    HotelListView,
    HotelRoomsListView,
)

urlpatterns = [
    path("hotels", HotelListView.as_view(), name="hotel-list"),
    path("hotels/rooms", HotelRoomsListView.as_view(), name="hotel-rooms-list"),
    path("hotels/<int:hotel_id>", HotelDetailView.as_view(), name="hotel-detail"),
    path("activities", ActivityListView.as_view(), name="activity-list"),
]
