from __future__ import annotations

from typing import Optional


class InMemoryTicketPaymentService:
    """Records charges in call order. Set `failure` to make the next calls raise it."""

    def __init__(self, failure: Optional[Exception] = None) -> None:
        self.failure = failure
        self.payments: list[tuple[int, int]] = []

    async def make_payment(self, account_id: int, total_amount: int) -> None:
        if self.failure is not None:
            raise self.failure
        self.payments.append((account_id, total_amount))

    def total_charged(self, account_id: int) -> int:
        return sum(amount for acc, amount in self.payments if acc == account_id)


class InMemorySeatReservationService:
    """Records seat reservations in call order. Set `failure` to make the next calls raise it."""

    def __init__(self, failure: Optional[Exception] = None) -> None:
        self.failure = failure
        self.reservations: list[tuple[int, int]] = []

    async def reserve_seat(self, account_id: int, total_seats: int) -> None:
        if self.failure is not None:
            raise self.failure
        self.reservations.append((account_id, total_seats))

    def seats_reserved(self, account_id: int) -> int:
        return sum(seats for acc, seats in self.reservations if acc == account_id)
