"""Aggregation, pricing and seat allocation over ticket requests."""

from collections import Counter
from collections.abc import Iterable

from tickets.domain.value_objects import (
    TICKET_PRICES,
    TicketCategory,
    TicketCounts,
    TicketRequest,
)

# Infants sit with an accompanying adult and take no seat.
SEATLESS_CATEGORIES = frozenset({TicketCategory.INFANT})


def aggregate(requests: Iterable[TicketRequest]) -> TicketCounts:
    """Sum requested counts per category."""
    counts: Counter[TicketCategory] = Counter()
    for request in requests:
        counts[request.category] += request.count
    return TicketCounts(counts)


def total_price(counts: TicketCounts) -> int:
    return sum(TICKET_PRICES[category] * count for category, count in counts.items())


def total_seats(counts: TicketCounts) -> int:
    return sum(
        count
        for category, count in counts.items()
        if category not in SEATLESS_CATEGORIES
    )
