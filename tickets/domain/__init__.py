from tickets.domain.errors import DomainError, ErrorCode, InvalidPurchaseError
from tickets.domain.pricing import aggregate, total_price, total_seats
from tickets.domain.rules import DEFAULT_RULES, PurchaseRule, find_violation
from tickets.domain.value_objects import (
    MAX_TICKETS_PER_PURCHASE,
    TICKET_PRICES,
    AccountId,
    TicketCategory,
    TicketCounts,
    TicketRequest,
)

__all__ = [
    "AccountId",
    "TicketCategory",
    "TicketCounts",
    "TicketRequest",
    "TICKET_PRICES",
    "MAX_TICKETS_PER_PURCHASE",
    "DomainError",
    "ErrorCode",
    "InvalidPurchaseError",
    "PurchaseRule",
    "DEFAULT_RULES",
    "find_violation",
    "aggregate",
    "total_price",
    "total_seats",
]
