"""Ticket service - all purchase business logic lives here.

Services:
- Depend only on interfaces (gateways)
- Validate domain invariants
- Perform orchestration and error mapping
- Raise domain errors
"""

import logging
from collections.abc import Sequence

from tickets.domain import (
    DEFAULT_RULES,
    AccountId,
    InvalidPurchaseError,
    PurchaseRule,
    TicketRequest,
    aggregate,
    find_violation,
    total_price,
    total_seats,
)
from tickets.gateways.interfaces import PaymentService, SeatReservationService

logger = logging.getLogger(__name__)


class TicketService:
    """Service for validating, pricing and placing ticket purchases."""

    def __init__(
        self,
        payment_service: PaymentService,
        seat_reservation_service: SeatReservationService,
        rules: Sequence[PurchaseRule] = DEFAULT_RULES,
    ) -> None:
        self._payment_service = payment_service
        self._seat_reservation_service = seat_reservation_service
        self._rules = tuple(rules)

    def purchase_tickets(self, account_id: int, *requests: TicketRequest) -> None:
        """Charge the account and reserve its seats.

        Payment is taken first, then seats are reserved. Nothing is called
        unless every rule passes. Gateway errors are not caught.

        Raises:
            InvalidPurchaseError: If the account ID is not positive or the
                requests break a purchase rule.
        """
        try:
            account = AccountId(account_id)
        except ValueError:
            logger.debug("Purchase rejected: invalid account id %r", account_id)
            raise InvalidPurchaseError() from None

        counts = aggregate(requests)
        violation = find_violation(counts, self._rules)
        if violation is not None:
            logger.debug(
                "Purchase rejected for account %s: %s", account.value, violation.name
            )
            raise InvalidPurchaseError()

        amount = total_price(counts)
        seats = total_seats(counts)
        logger.info(
            "Purchase accepted: account=%s amount=%s seats=%s",
            account.value,
            amount,
            seats,
        )
        self._payment_service.make_payment(account.value, amount)
        self._seat_reservation_service.reserve_seat(account.value, seats)
