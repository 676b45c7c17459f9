from django.contrib import admin

from conference.models import (
    Activity,
    Address,
    Booking,
    Enrollment,
    Hotel,
    Place,
    Room,
    Ticket,
    TicketType,
    UserActivity,
)


class AddressInline(admin.StackedInline):
    model = Address
    extra = 0


class TicketInline(admin.TabularInline):
    model = Ticket
    extra = 0


class RoomInline(admin.TabularInline):
    model = Room
    extra = 1


class BookingInline(admin.TabularInline):
    model = Booking
    extra = 0


@admin.register(Enrollment)
class EnrollmentAdmin(admin.ModelAdmin):
    list_display = ["name", "user", "created_at"]
    search_fields = ["name", "user__username"]
    inlines = [AddressInline, TicketInline]


@admin.register(TicketType)
class TicketTypeAdmin(admin.ModelAdmin):
    list_display = ["name", "price", "is_remote", "includes_hotel"]
    list_filter = ["is_remote", "includes_hotel"]


@admin.register(Ticket)
class TicketAdmin(admin.ModelAdmin):
    list_display = ["enrollment", "ticket_type", "status", "created_at"]
    list_filter = ["status", "ticket_type"]


@admin.register(Hotel)
class HotelAdmin(admin.ModelAdmin):
    list_display = ["name", "created_at"]
    search_fields = ["name"]
    inlines = [RoomInline]


@admin.register(Room)
class RoomAdmin(admin.ModelAdmin):
    list_display = ["name", "hotel", "capacity"]
    list_filter = ["hotel"]
    inlines = [BookingInline]


@admin.register(Place)
class PlaceAdmin(admin.ModelAdmin):
    search_fields = ["name"]


@admin.register(Activity)
class ActivityAdmin(admin.ModelAdmin):
    list_display = ["name", "place", "day", "starts_at", "ends_at"]
    list_filter = ["place", "day"]


@admin.register(UserActivity)
class UserActivityAdmin(admin.ModelAdmin):
    list_display = ["user", "activity", "created_at"]
    list_filter = ["activity__place"]
