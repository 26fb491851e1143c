from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from ..domain.errors import InvalidPurchaseError, PurchaseErrorKind
from ..domain.gateways import SeatReservationService, TicketPaymentService
from ..domain.services import (
    calculate_total_amount,
    check_business_rules,
    count_tickets,
    validate_purchase_request,
)
from ..models import PurchaseOutcome, TicketTypeRequest
from ..utils.audit_log import emit_audit_log
from ..utils.request_id import request_id_scope

logger = logging.getLogger(__name__)


class PurchaseOrchestrator:
    """Validates a ticket purchase, charges the account, then reserves seats.

    Holds only its two collaborators, so one instance can serve concurrent
    purchases. A failed reservation does not refund the payment.
    """

    def __init__(
        self,
        seat_reservation_service: SeatReservationService,
        ticket_payment_service: TicketPaymentService,
    ) -> None:
        self._seat_reservation_service = seat_reservation_service
        self._ticket_payment_service = ticket_payment_service

    async def purchase_tickets(
        self,
        account_id: Optional[int],
        ticket_requests: Optional[Iterable[Optional[TicketTypeRequest]]],
    ) -> PurchaseOutcome:
        # read once so iterators are validated and counted from the same items
        requests = list(ticket_requests) if ticket_requests is not None else None
        with request_id_scope() as request_id:
            return await self._audited_purchase(account_id, requests, request_id)

    async def _audited_purchase(
        self,
        account_id: Optional[int],
        ticket_requests: Optional[list[Optional[TicketTypeRequest]]],
        request_id: str,
    ) -> PurchaseOutcome:
        logger.info(
            "Initiating ticket purchase %s for account %s with %d ticket requests",
            request_id,
            account_id,
            len(ticket_requests) if ticket_requests is not None else 0,
        )
        try:
            outcome = await self._purchase(account_id, ticket_requests)
        except InvalidPurchaseError as exc:
            logger.error("Ticket purchase %s rejected for account %s: %s", request_id, account_id, exc)
            self._audit(
                action="purchase.rejected",
                account_id=account_id,
                error_kind=exc.kind,
                message=exc.message,
            )
            raise

        self._audit(
            action="purchase.completed",
            account_id=outcome.account_id,
            adult_count=outcome.adult_count,
            child_count=outcome.child_count,
            infant_count=outcome.infant_count,
            total_amount=outcome.total_amount,
            total_seats=outcome.total_seats,
        )
        logger.info(
            "Ticket purchase successful for account %s (adult=%d, child=%d, infant=%d)",
            outcome.account_id,
            outcome.adult_count,
            outcome.child_count,
            outcome.infant_count,
        )
        return outcome

    @staticmethod
    def _audit(**fields: Any) -> None:
        """Audit failures are logged; they never change the purchase result."""
        try:
            emit_audit_log(**fields)
        except RuntimeError:
            logger.exception("Failed to emit %s audit event for account %s", fields["action"], fields["account_id"])

    async def _purchase(
        self,
        account_id: Optional[int],
        ticket_requests: Optional[list[Optional[TicketTypeRequest]]],
    ) -> PurchaseOutcome:
        validate_purchase_request(account_id, ticket_requests)
        requests = [request for request in ticket_requests or () if request is not None]

        counts = count_tickets(requests)
        logger.debug(
            "Aggregated ticket counts: adult=%d, child=%d, infant=%d",
            counts.adult,
            counts.child,
            counts.infant,
        )
        check_business_rules(counts)

        total_amount = calculate_total_amount(counts)
        total_seats = counts.seats
        logger.debug(
            "Total tickets=%d, seats to reserve=%d, amount to pay=%d",
            counts.total,
            total_seats,
            total_amount,
        )

        await self._process_payment(account_id, total_amount)
        await self._reserve_seats(account_id, total_seats)

        return PurchaseOutcome(
            account_id=account_id,
            adult_count=counts.adult,
            child_count=counts.child,
            infant_count=counts.infant,
            total_amount=total_amount,
            total_seats=total_seats,
        )

    async def _process_payment(self, account_id: int, total_amount: int) -> None:
        try:
            await self._ticket_payment_service.make_payment(account_id, total_amount)
        except Exception as exc:
            logger.exception("Payment service error for account %s", account_id)
            raise InvalidPurchaseError(PurchaseErrorKind.PAYMENT_FAILED, f"Payment failed: {exc}") from exc
        logger.info("Payment successful for account %s (charged %d)", account_id, total_amount)

    async def _reserve_seats(self, account_id: int, total_seats: int) -> None:
        try:
            await self._seat_reservation_service.reserve_seat(account_id, total_seats)
        except Exception as exc:
            # payment already went through and is not reversed here
            logger.exception("Seat reservation service error for account %s", account_id)
            raise InvalidPurchaseError(
                PurchaseErrorKind.RESERVATION_FAILED,
                f"Seat reservation failed: {exc}",
            ) from exc
        logger.info("Seat reservation successful for account %s (reserved %d seats)", account_id, total_seats)
