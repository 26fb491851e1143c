from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class TicketType(StrEnum):
    ADULT = "adult"
    CHILD = "child"
    INFANT = "infant"


@dataclass(frozen=True)
class TicketTypeRequest:
    """Immutable request for a number of tickets of one type.

    Quantities are not checked here; the purchase pipeline reports bad values.
    """

    ticket_type: TicketType
    no_of_tickets: int


@dataclass(frozen=True)
class PurchaseOutcome:
    account_id: int
    adult_count: int
    child_count: int
    infant_count: int
    total_amount: int
    total_seats: int
