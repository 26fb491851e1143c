from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from ..models import TicketType, TicketTypeRequest
from .errors import InvalidPurchaseError, PurchaseErrorKind

MAX_TICKETS_PER_PURCHASE = 25

TICKET_PRICES: dict[TicketType, int] = {
    TicketType.ADULT: 20,
    TicketType.CHILD: 10,
    TicketType.INFANT: 0,
}


@dataclass(frozen=True)
class TicketCounts:
    adult: int = 0
    child: int = 0
    infant: int = 0

    @property
    def total(self) -> int:
        return self.adult + self.child + self.infant

    @property
    def seats(self) -> int:
        # infants sit on an adult's lap
        return self.adult + self.child


def validate_purchase_request(
    account_id: Optional[int],
    ticket_requests: Optional[Sequence[Optional[TicketTypeRequest]]],
) -> None:
    """
    Shape checks run before anything else. Items are checked in input order,
    so the first bad item decides the reported error.
    """
    if account_id is None or account_id <= 0:
        raise InvalidPurchaseError(PurchaseErrorKind.INVALID_ACCOUNT, "Account id must be valid")
    if not ticket_requests:
        raise InvalidPurchaseError(
            PurchaseErrorKind.NO_TICKET_TYPE_REQUESTED,
            "At least one ticket type must be requested",
        )

    total_tickets = 0
    for request in ticket_requests:
        if request is None:
            raise InvalidPurchaseError(PurchaseErrorKind.NULL_TICKET_REQUEST, "Ticket request must not be null")
        if request.no_of_tickets < 0:
            raise InvalidPurchaseError(PurchaseErrorKind.NEGATIVE_QUANTITY, "Ticket quantity must be positive")
        total_tickets += request.no_of_tickets

    if total_tickets == 0:
        raise InvalidPurchaseError(
            PurchaseErrorKind.NO_TICKETS_REQUESTED,
            "At least one ticket must be requested",
        )


def count_tickets(ticket_requests: Sequence[TicketTypeRequest]) -> TicketCounts:
    """Sum quantities per ticket type. Repeated types add up."""
    totals: dict[TicketType, int] = {}
    for request in ticket_requests:
        totals[request.ticket_type] = totals.get(request.ticket_type, 0) + request.no_of_tickets
    return TicketCounts(
        adult=totals.get(TicketType.ADULT, 0),
        child=totals.get(TicketType.CHILD, 0),
        infant=totals.get(TicketType.INFANT, 0),
    )


def check_business_rules(counts: TicketCounts) -> None:
    """Rule order is fixed: accompaniment, then capacity, then infant ratio."""
    if (counts.child > 0 or counts.infant > 0) and counts.adult == 0:
        raise InvalidPurchaseError(
            PurchaseErrorKind.NO_ADULT_FOR_DEPENDENT,
            "Adult ticket must be purchased for child or infant",
        )
    if counts.total > MAX_TICKETS_PER_PURCHASE:
        raise InvalidPurchaseError(
            PurchaseErrorKind.TOO_MANY_TICKETS,
            f"Total tickets must not exceed {MAX_TICKETS_PER_PURCHASE}",
        )
    if counts.infant > counts.adult:
        raise InvalidPurchaseError(
            PurchaseErrorKind.TOO_MANY_INFANTS,
            "Infant tickets cannot be more than adult tickets",
        )


def calculate_total_amount(counts: TicketCounts) -> int:
    return (
        counts.adult * TICKET_PRICES[TicketType.ADULT]
        + counts.child * TICKET_PRICES[TicketType.CHILD]
        + counts.infant * TICKET_PRICES[TicketType.INFANT]
    )
