"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Leave domain errors to the exception handler in handlers/errors.py
- Never contain business logic
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from conference.handlers.dependencies import get_activity_service, get_hotel_service
from conference.handlers.serializers import (
    ActivityListingSerializer,
    ActivityRegistrationRequestSerializer,
    ActivityRegistrationSerializer,
    HotelSerializer,
    HotelWithRoomsAndBookingsSerializer,
    HotelWithRoomsSerializer,
)


class HotelListView(APIView):
    """Handler for GET /api/hotels"""

    def get(self, request: Request) -> Response:
        hotels = get_hotel_service().get_hotels(request.user.id)
        return Response(HotelSerializer(hotels, many=True).data)


class HotelRoomsListView(APIView):
    """Handler for GET /api/hotels/rooms"""

    def get(self, request: Request) -> Response:
        hotels = get_hotel_service().get_all_hotels_with_rooms(request.user.id)
        return Response(HotelWithRoomsAndBookingsSerializer(hotels, many=True).data)


class HotelDetailView(APIView):
    """Handler for GET /api/hotels/{hotel_id}"""

    def get(self, request: Request, hotel_id: int) -> Response:
        hotel = get_hotel_service().get_hotel_with_rooms(request.user.id, hotel_id)
        return Response(HotelWithRoomsSerializer(hotel).data)


class ActivityListView(APIView):
    """Handler for GET and POST /api/activities"""

    def get(self, request: Request) -> Response:
        listings = get_activity_service().get_activities(request.user.id)
        return Response(ActivityListingSerializer(listings, many=True).data)

    def post(self, request: Request) -> Response:
        payload = ActivityRegistrationRequestSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        registration = get_activity_service().create_user_activity(
            request.user.id, payload.validated_data["activity_id"]
        )
        return Response(
            ActivityRegistrationSerializer(registration).data,
            status=status.HTTP_201_CREATED,
        )
