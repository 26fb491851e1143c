"""Purchase error taxonomy."""

from enum import Enum


class PurchaseErrorKind(Enum):
    INVALID_ACCOUNT = "INVALID_ACCOUNT"
    NO_TICKET_TYPE_REQUESTED = "NO_TICKET_TYPE_REQUESTED"
    NULL_TICKET_REQUEST = "NULL_TICKET_REQUEST"
    NEGATIVE_QUANTITY = "NEGATIVE_QUANTITY"
    NO_TICKETS_REQUESTED = "NO_TICKETS_REQUESTED"
    NO_ADULT_FOR_DEPENDENT = "NO_ADULT_FOR_DEPENDENT"
    TOO_MANY_TICKETS = "TOO_MANY_TICKETS"
    TOO_MANY_INFANTS = "TOO_MANY_INFANTS"
    PAYMENT_FAILED = "PAYMENT_FAILED"
    RESERVATION_FAILED = "RESERVATION_FAILED"


class InvalidPurchaseError(Exception):
    """Raised for every rejected or failed purchase; `kind` tells which rule."""

    def __init__(self, kind: PurchaseErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"
