from conference.domain.models import (
    Activity,
    ActivityListing,
    ActivityRegistration,
    Address,
    Booking,
    Enrollment,
    Hotel,
    Room,
    Ticket,
    TicketType,
)
from conference.domain.value_objects import Money, TicketStatus

__all__ = [
    "Activity",
    "ActivityListing",
    "ActivityRegistration",
    "Address",
    "Booking",
    "Enrollment",
    "Hotel",
    "Room",
    "Ticket",
    "TicketType",
    "Money",
    "TicketStatus",
]
