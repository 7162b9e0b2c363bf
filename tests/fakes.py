"""Recording gateway doubles."""

from tickets.gateways.interfaces import PaymentService, SeatReservationService


class RecordingPaymentService(PaymentService):
    def __init__(self, calls: list[tuple]) -> None:
        self.calls = calls

    def make_payment(self, account_id: int, amount: int) -> None:
        self.calls.append(("make_payment", account_id, amount))


class RecordingSeatReservationService(SeatReservationService):
    def __init__(self, calls: list[tuple]) -> None:
        self.calls = calls

    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        self.calls.append(("reserve_seat", account_id, seat_count))


class DecliningPaymentService(PaymentService):
    def make_payment(self, account_id: int, amount: int) -> None:
        raise RuntimeError("card declined")


# Shared by the gateways the HTTP handler builds from settings.
GATEWAY_CALLS: list[tuple] = []


class SettingsPaymentService(RecordingPaymentService):
    def __init__(self) -> None:
        super().__init__(GATEWAY_CALLS)


class SettingsSeatReservationService(RecordingSeatReservationService):
    def __init__(self) -> None:
        super().__init__(GATEWAY_CALLS)
