"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from tests.fakes import (
    GATEWAY_CALLS,
    RecordingPaymentService,
    RecordingSeatReservationService,
)
from tickets.services.ticket_service import TicketService


@pytest.fixture
def calls() -> list[tuple]:
    return []


@pytest.fixture
def ticket_service(calls: list[tuple]) -> TicketService:
    return TicketService(
        RecordingPaymentService(calls), RecordingSeatReservationService(calls)
    )


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def gateway_calls(settings):
    """Route the gateways built by the HTTP handler into a call log."""
    settings.TICKETS_PAYMENT_SERVICE = "tests.fakes.SettingsPaymentService"
    settings.TICKETS_SEAT_RESERVATION_SERVICE = "tests.fakes.SettingsSeatReservationService"
    GATEWAY_CALLS.clear()
    yield GATEWAY_CALLS
    GATEWAY_CALLS.clear()
