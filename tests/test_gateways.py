"""Tests for the placeholder gateways.

Run with: pytest tests/test_gateways.py -v
"""

import logging

from tickets.gateways.logging_gateways import (
    LoggingPaymentService,
    LoggingSeatReservationService,
)


class TestLoggingGateways:
    """The placeholders log the request and return."""

    def test_payment_is_logged(self, caplog):
        with caplog.at_level(logging.INFO, logger="tickets"):
            LoggingPaymentService().make_payment(123, 140)
        assert "Payment requested: account=123 amount=140" in caplog.text

    def test_seat_reservation_is_logged(self, caplog):
        with caplog.at_level(logging.INFO, logger="tickets"):
            LoggingSeatReservationService().reserve_seat(123, 9)
        assert "Seat reservation requested: account=123 seats=9" in caplog.text
