"""Serializers for parsing purchase requests into domain values.

Only the input format is checked here. Negative counts and non-positive
account IDs are well-formed input that the service itself rejects.
"""

from rest_framework import serializers

from tickets.domain import TicketCategory, TicketRequest


class TicketRequestSerializer(serializers.Serializer):
    """Serializer for a single TicketRequest."""

    category = serializers.ChoiceField(choices=[c.value for c in TicketCategory])
    count = serializers.IntegerField()


class PurchaseSerializer(serializers.Serializer):
    """Serializer for a purchase: an account and its ticket requests."""

    account_id = serializers.IntegerField()
    tickets = TicketRequestSerializer(many=True, allow_empty=True)

    def ticket_requests(self) -> list[TicketRequest]:
        return [
            TicketRequest.from_values(**item) for item in self.validated_data["tickets"]
        ]
