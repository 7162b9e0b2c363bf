"""Placeholder gateways that record the request in the log and return.

The real payment provider and seat booking system are operated by third
parties. Point TICKETS_PAYMENT_SERVICE and TICKETS_SEAT_RESERVATION_SERVICE
at client implementations to talk to them.
"""

import logging

from tickets.gateways.interfaces import PaymentService, SeatReservationService

logger = logging.getLogger(__name__)


class LoggingPaymentService(PaymentService):
    def make_payment(self, account_id: int, amount: int) -> None:
        logger.info("Payment requested: account=%s amount=%s", account_id, amount)


class LoggingSeatReservationService(SeatReservationService):
    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        logger.info(
            "Seat reservation requested: account=%s seats=%s", account_id, seat_count
        )
