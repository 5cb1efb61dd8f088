from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from flight_reservation.order.domain.builder import FlightOrderBuilder
from flight_reservation.shared.domain import Entity, Money

if TYPE_CHECKING:
    from flight_reservation.flight.domain import ScheduledFlight
    from flight_reservation.order.domain import FlightOrder, Order


class Customer(Entity[str]):
    """顧客

    メールアドレスで同一性を判定する。
    作成した注文を保持し、注文の一覧は追記のみ可能。
    """

    def __init__(self, name: str, email: str) -> None:
        if not email:
            raise ValueError("Customer email cannot be empty")
        super().__init__(email)
        self._name = name
        self._orders: list[Order] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self.id

    @property
    def orders(self) -> tuple[Order, ...]:
        return tuple(self._orders)

    def add_order(self, order: Order) -> None:
        self._orders.append(order)

    def create_order(
        self,
        passenger_names: Sequence[str],
        flights: Sequence[ScheduledFlight],
        price: Money,
        builder: FlightOrderBuilder | None = None,
    ) -> FlightOrder:
        """この顧客名義で注文を作成する（検証は FlightOrderBuilder が行う）"""
        builder = builder or FlightOrderBuilder()
        return builder.build(self, passenger_names, flights, price)
