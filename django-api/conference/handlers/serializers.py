"""Serializers for transforming domain models to API responses."""

from rest_framework import serializers


class HotelSerializer(serializers.Serializer):
    """Serializer for Hotel domain model, without rooms."""

    id = serializers.IntegerField()
    name = serializers.CharField()
    image = serializers.CharField()
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()


class BookingSerializer(serializers.Serializer):
    """Serializer for Booking domain model."""

    id = serializers.IntegerField()
    user_id = serializers.IntegerField()
    room_id = serializers.IntegerField()
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()


class RoomSerializer(serializers.Serializer):
    """Serializer for Room domain model."""

    id = serializers.IntegerField()
    hotel_id = serializers.IntegerField()
    name = serializers.CharField()
    capacity = serializers.IntegerField()


class RoomWithBookingsSerializer(RoomSerializer):
    bookings = BookingSerializer(many=True)


class HotelWithRoomsSerializer(HotelSerializer):
    rooms = RoomSerializer(many=True)


class HotelWithRoomsAndBookingsSerializer(HotelSerializer):
    rooms = RoomWithBookingsSerializer(many=True)


class ActivityListingSerializer(serializers.Serializer):
    """Flattens an ActivityListing into the activity fields plus its flag."""

    id = serializers.IntegerField(source="activity.id")
    name = serializers.CharField(source="activity.name")
    day = serializers.DateField(source="activity.day")
    starts_at = serializers.TimeField(source="activity.starts_at")
    ends_at = serializers.TimeField(source="activity.ends_at")
    place_id = serializers.IntegerField(source="activity.place_id")
    user_subscribed = serializers.BooleanField()


class ActivityRegistrationSerializer(serializers.Serializer):
    """Serializer for ActivityRegistration domain model."""

    id = serializers.IntegerField()
    user_id = serializers.IntegerField()
    activity_id = serializers.IntegerField()
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()


class ActivityRegistrationRequestSerializer(serializers.Serializer):
    """Validates the body of POST /api/activities."""

    activity_id = serializers.IntegerField(min_value=1)
