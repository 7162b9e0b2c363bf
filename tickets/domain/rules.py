"""Business rules applied to the aggregated ticket counts of a purchase.

Each rule answers one question: is this purchase in breach of me?
A purchase is rejected when any rule in the active rule set is violated.
To add a rule, implement PurchaseRule and append it to DEFAULT_RULES.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from tickets.domain.value_objects import (
    MAX_TICKETS_PER_PURCHASE,
    TicketCategory,
    TicketCounts,
)


class PurchaseRule(ABC):
    """Interface for a single purchase rule."""

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def is_violated(self, counts: TicketCounts) -> bool:
        """Return True if the purchase breaks this rule."""
        ...


class NoNegativeCountsRule(PurchaseRule):
    """No category may total fewer than zero tickets."""

    def is_violated(self, counts: TicketCounts) -> bool:
        return any(count < 0 for count in counts.values())


@dataclass(frozen=True)
class MaxTicketsRule(PurchaseRule):
    """At most `limit` tickets per purchase, across all categories."""

    limit: int = MAX_TICKETS_PER_PURCHASE

    def is_violated(self, counts: TicketCounts) -> bool:
        return counts.total > self.limit


class InfantsRequireAdultLapsRule(PurchaseRule):
    """Each infant sits on an adult's lap, so infants cannot outnumber adults."""

    def is_violated(self, counts: TicketCounts) -> bool:
        return counts[TicketCategory.INFANT] > counts[TicketCategory.ADULT]


class MinorsRequireAdultRule(PurchaseRule):
    """Child and infant tickets cannot be bought without an adult ticket."""

    def is_violated(self, counts: TicketCounts) -> bool:
        minors = counts[TicketCategory.CHILD] + counts[TicketCategory.INFANT]
        return minors > 0 and counts[TicketCategory.ADULT] == 0


DEFAULT_RULES: tuple[PurchaseRule, ...] = (
    NoNegativeCountsRule(),
    MaxTicketsRule(),
    InfantsRequireAdultLapsRule(),
    MinorsRequireAdultRule(),
)


def find_violation(
    counts: TicketCounts, rules: tuple[PurchaseRule, ...] = DEFAULT_RULES
) -> PurchaseRule | None:
    """Return the first violated rule, or None if the purchase passes."""
    return next((rule for rule in rules if rule.is_violated(counts)), None)
