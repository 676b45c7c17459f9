"""Pure eligibility rules over fetched enrollment and ticket state.

Both rules answer "has the user paid for an in-person pass that entitles
them to this feature". Ticket-type flags are independent business data, so
each rule is a short-circuit conjunction over them.
"""

from dataclasses import dataclass

from conference.domain.errors import DomainError
from conference.domain.models import Ticket
from conference.domain.value_objects import TicketStatus


@dataclass(frozen=True)
class Eligibility:
    """Outcome of an access check: allowed, or denied with a domain error."""

    error: DomainError | None = None

    @property
    def allowed(self) -> bool:
        return self.error is None

    def raise_for_denial(self) -> None:
        if self.error is not None:
            raise self.error


ALLOWED = Eligibility()


def _is_paid_in_person(ticket: Ticket | None) -> bool:
    if ticket is None:
        return False
    if ticket.status is TicketStatus.RESERVED:
        return False
    return not ticket.ticket_type.is_remote


def ticket_grants_hotel(ticket: Ticket | None) -> bool:
    """True if the ticket is paid, in person and includes a hotel stay."""
    return _is_paid_in_person(ticket) and ticket.ticket_type.includes_hotel


def ticket_grants_activities(ticket: Ticket | None) -> bool:
    """True if the ticket is paid and in person.

    Hotel inclusion is not required for activities.
    """
    return _is_paid_in_person(ticket)
