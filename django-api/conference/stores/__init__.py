from conference.stores.interfaces import (
    ActivityStore,
    DuplicateRegistrationError,
    EligibilityStore,
    HotelStore,
    UnknownActivityError,
)

__all__ = [
    "ActivityStore",
    "DuplicateRegistrationError",
    "EligibilityStore",
    "HotelStore",
    "UnknownActivityError",
]
