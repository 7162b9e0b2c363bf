"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from django.conf import settings
from django.utils.module_loading import import_string
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from tickets.domain import DomainError
from tickets.handlers.serializers import PurchaseSerializer
from tickets.services.ticket_service import TicketService


def get_ticket_service() -> TicketService:
    """Build a TicketService wired to the gateways named in settings."""
    payment_service = import_string(settings.TICKETS_PAYMENT_SERVICE)()
    seat_reservation_service = import_string(settings.TICKETS_SEAT_RESERVATION_SERVICE)()
    return TicketService(payment_service, seat_reservation_service)


class PurchaseView(APIView):
    """Handler for POST /api/purchases"""

    def post(self, request: Request) -> Response:
        serializer = PurchaseSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        service = get_ticket_service()
        try:
            service.purchase_tickets(
                serializer.validated_data["account_id"],
                *serializer.ticket_requests(),
            )
        except DomainError as exc:
            return Response(
                {"code": exc.code.value, "message": exc.message},
                status=status.HTTP_400_BAD_REQUEST,
            )
        return Response(status=status.HTTP_204_NO_CONTENT)
