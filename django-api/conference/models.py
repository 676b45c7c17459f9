"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/.
"""

from django.conf import settings
from django.db import models


class Enrollment(models.Model):
    """Persistence model for a user's enrollment."""

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="enrollment"
    )
    name = models.CharField(max_length=255)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return self.name


class Address(models.Model):
    """Persistence model for an enrollment's postal address."""

    enrollment = models.OneToOneField(
        Enrollment, on_delete=models.CASCADE, related_name="address"
    )
    street = models.CharField(max_length=255)
    number = models.CharField(max_length=32)
    neighborhood = models.CharField(max_length=255)
    city = models.CharField(max_length=255)
    state = models.CharField(max_length=64)
    postal_code = models.CharField(max_length=16)
    detail = models.CharField(max_length=255, blank=True)

    def __str__(self) -> str:
        return f"{self.street}, {self.number} - {self.city}"


class TicketType(models.Model):
    """Persistence model for ticket types."""

    name = models.CharField(max_length=100)
    price = models.DecimalField(max_digits=10, decimal_places=2)
    is_remote = models.BooleanField(default=False)
    includes_hotel = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return f"{self.name} - {self.price}"


class Ticket(models.Model):
    """Persistence model for tickets."""

    class Status(models.TextChoices):
        RESERVED = "RESERVED"
        PAID = "PAID"

    enrollment = models.ForeignKey(
        Enrollment, on_delete=models.CASCADE, related_name="tickets"
    )
    ticket_type = models.ForeignKey(
        TicketType, on_delete=models.PROTECT, related_name="tickets"
    )
    status = models.CharField(
        max_length=16, choices=Status.choices, default=Status.RESERVED
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        indexes = [
            models.Index(
                fields=["enrollment", "-created_at"], name="ticket_enrollment_recent_idx"
            ),
        ]

    def __str__(self) -> str:
        return f"{self.enrollment} - {self.status}"


class Hotel(models.Model):
    """Persistence model for hotels."""

    name = models.CharField(max_length=255)
    image = models.URLField(max_length=500, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:
        return self.name


class Room(models.Model):
    """Persistence model for hotel rooms."""

    hotel = models.ForeignKey(Hotel, on_delete=models.CASCADE, related_name="rooms")
    name = models.CharField(max_length=100)
    capacity = models.PositiveIntegerField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.hotel.name} - {self.name}"


class Booking(models.Model):
    """Persistence model for room bookings."""

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="bookings"
    )
    room = models.ForeignKey(Room, on_delete=models.CASCADE, related_name="bookings")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.user} - {self.room}"


class Place(models.Model):
    """Persistence model for the venues activities take place in."""

    name = models.CharField(max_length=255)

    def __str__(self) -> str:
        return self.name


class Activity(models.Model):
    """Persistence model for activities."""

    name = models.CharField(max_length=255)
    day = models.DateField()
    starts_at = models.TimeField()
    ends_at = models.TimeField()
    place = models.ForeignKey(Place, on_delete=models.CASCADE, related_name="activities")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["day", "starts_at", "id"]
        verbose_name_plural = "activities"

    def __str__(self) -> str:
        return f"{self.name} - {self.day}"


class UserActivity(models.Model):
    """Persistence model for activity registrations."""

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="user_activities"
    )
    activity = models.ForeignKey(
        Activity, on_delete=models.CASCADE, related_name="registrations"
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name_plural = "user activities"
        constraints = [
            models.UniqueConstraint(
                fields=["user"], name="one_activity_registration_per_user"
            ),
        ]

    def __str__(self) -> str:
        return f"{self.user} - {self.activity}"
