"""Domain primitives that enforce validity at creation time."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Self


class TicketCategory(Enum):
    """Closed set of ticket categories."""

    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"


@dataclass(frozen=True)
class AccountId:
    """Identifier of the purchasing account. Must be a positive integer."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("Account ID must be an integer")
        if self.value <= 0:
            raise ValueError("Account ID must be positive")


@dataclass(frozen=True)
class TicketRequest:
    """A number of tickets requested for one category.

    The count is kept exactly as supplied, negative values included.
    Rejecting them is the job of the purchase rules.
    """

    category: TicketCategory
    count: int

    @classmethod
    def from_values(cls, category: str, count: int) -> Self:
        return cls(category=TicketCategory(category), count=count)


@dataclass(frozen=True, eq=False)
class TicketCounts(Mapping[TicketCategory, int]):
    """Read-only per-category totals for a single purchase.

    Every category is present; categories nobody asked for read as 0.
    """

    _counts: Mapping[TicketCategory, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        counts = {category: 0 for category in TicketCategory}
        counts.update(self._counts)
        object.__setattr__(self, "_counts", MappingProxyType(counts))

    def __getitem__(self, category: TicketCategory) -> int:
        return self._counts[category]

    def __iter__(self) -> Iterator[TicketCategory]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    @property
    def total(self) -> int:
        return sum(self._counts.values())


TICKET_PRICES: Mapping[TicketCategory, int] = MappingProxyType(
    {
        TicketCategory.ADULT: 20,
        TicketCategory.CHILD: 10,
        TicketCategory.INFANT: 0,
    }
)

MAX_TICKETS_PER_PURCHASE = 20
