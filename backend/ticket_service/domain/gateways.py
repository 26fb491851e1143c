from __future__ import annotations

from typing import Protocol


class TicketPaymentService(Protocol):
    async def make_payment(self, account_id: int, total_amount: int) -> None: ...


class SeatReservationService(Protocol):
    async def reserve_seat(self, account_id: int, total_seats: int) -> None: ...
