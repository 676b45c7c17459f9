"""Domain error codes for the conference module."""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class ErrorCode(Enum):
    """Domain error codes."""

    ENROLLMENT_NOT_FOUND = "ENROLLMENT_NOT_FOUND"
    BOOKING_NOT_FOUND = "BOOKING_NOT_FOUND"
    HOTEL_NOT_FOUND = "HOTEL_NOT_FOUND"
    CANNOT_LIST_HOTELS = "CANNOT_LIST_HOTELS"
    CANNOT_LIST_ACTIVITIES = "CANNOT_LIST_ACTIVITIES"
    ACTIVITY_ALREADY_REGISTERED = "ACTIVITY_ALREADY_REGISTERED"
    INVALID_ACTIVITY = "INVALID_ACTIVITY"


class ErrorKind(Enum):
    """Broad failure categories; the handler layer maps these to transport codes."""

    NOT_FOUND = "NOT_FOUND"
    FORBIDDEN = "FORBIDDEN"
    CONFLICT = "CONFLICT"
    VALIDATION = "VALIDATION"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    kind: ClassVar[ErrorKind]

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EnrollmentNotFoundError(DomainError):
    """Raised when the user has no enrollment."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.ENROLLMENT_NOT_FOUND,
            message="Enrollment not found",
        )


class BookingNotFoundError(DomainError):
    """Raised when the user has no room booking."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.BOOKING_NOT_FOUND,
            message="Booking not found",
        )


class HotelNotFoundError(DomainError):
    """Raised when a hotel is not found."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.HOTEL_NOT_FOUND,
            message="Hotel not found",
        )


class CannotListHotelsError(DomainError):
    """Raised when the user's ticket does not grant hotel access."""

    kind = ErrorKind.FORBIDDEN

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.CANNOT_LIST_HOTELS,
            message="Cannot list hotels",
        )


class CannotListActivitiesError(DomainError):
    """Raised when the user's ticket does not grant activity access."""

    kind = ErrorKind.FORBIDDEN

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.CANNOT_LIST_ACTIVITIES,
            message="Cannot list activities",
        )


class ActivityAlreadyRegisteredError(DomainError):
    """Raised when the user already holds an activity registration."""

    kind = ErrorKind.CONFLICT

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.ACTIVITY_ALREADY_REGISTERED,
            message="User is already registered in an activity",
        )


class InvalidActivityError(DomainError):
    """Raised when a registration references an activity that does not exist."""

    kind = ErrorKind.VALIDATION

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ACTIVITY,
            message="Activity does not exist",
        )
