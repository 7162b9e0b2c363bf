"""Gateway interfaces for the third-party services a purchase depends on.

Gateways must be swappable. Failures are the implementation's concern;
whatever they raise reaches the caller of the service unchanged.
"""

from abc import ABC, abstractmethod


class PaymentService(ABC):
    """Interface for taking payment from an account."""

    @abstractmethod
    def make_payment(self, account_id: int, amount: int) -> None:
        """Charge `amount` to the account."""
        ...


class SeatReservationService(ABC):
    """Interface for reserving seats against an account."""

    @abstractmethod
    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        """Reserve `seat_count` seats for the account."""
        ...
