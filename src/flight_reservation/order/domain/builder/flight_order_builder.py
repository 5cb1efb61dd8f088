from __future__ import annotations

from contextlib import ExitStack, contextmanager
from typing import TYPE_CHECKING, Iterator, Sequence

from flight_reservation.flight.domain import (
    CapacityUnknown,
    Passenger,
    ScheduledFlight,
)
from flight_reservation.order.domain.entity import FlightOrder
from flight_reservation.order.domain.enum import OrderRule
from flight_reservation.order.domain.exception import InvalidOrder
from flight_reservation.order.domain.value_object import NoFlyList, OrderId
from flight_reservation.shared.domain import Money

if TYPE_CHECKING:
    from decimal import Decimal

    from flight_reservation.customer.domain import Customer


@contextmanager
def _locked(flights: Sequence[ScheduledFlight]) -> Iterator[None]:
    # フライト番号順に取得してデッドロックを避ける
    with ExitStack() as stack:
        for flight in sorted(flights, key=lambda f: f.number):
            stack.enter_context(flight.lock)
        yield


class FlightOrderBuilder:
    """フライト注文のビルダー

    入力（顧客・乗客名・フライト・価格）を検証し、FlightOrder を組み立てる。
    検証は次の順で行い、最初の違反で InvalidOrder を送出する。

    1. 顧客名が搭乗禁止リストにない
    2. どの乗客名も搭乗禁止リストにない
    3. すべてのフライトの空席数が乗客数以上

    検証から乗客登録までは対象フライトすべてのロックを保持したまま行うため、
    一部のフライトだけに乗客が登録されることはなく、
    並行して作成される注文が同じ便を超過予約することもない。
    """

    def __init__(self, no_fly_list: NoFlyList | None = None) -> None:
        self._no_fly_list = (
            no_fly_list if no_fly_list is not None else FlightOrder.no_fly_list()
        )

    def build(
        self,
        customer: Customer,
        passenger_names: Sequence[str],
        flights: Sequence[ScheduledFlight],
        price: Money | Decimal | int | str,
    ) -> FlightOrder:
        """注文を作成する

        成功時の副作用:
            - 各フライトに乗客を登録する
            - 顧客の注文一覧に追加する

        Raises:
            ValueError: 入力が不正な場合（空の乗客・フライト、重複便、負の価格）
            InvalidOrder: 搭乗禁止・座席数のルールに違反した場合
        """
        if customer is None:
            raise ValueError("Customer is required")
        if not passenger_names:
            raise ValueError("At least one passenger is required")
        if not flights:
            raise ValueError("At least one flight is required")
        if len({flight.number for flight in flights}) != len(flights):
            raise ValueError("The same flight cannot appear twice in an order")

        price = price if isinstance(price, Money) else Money.of(price)
        passengers = [Passenger(name) for name in passenger_names]

        with _locked(flights):
            self._validate(customer, passengers, flights)

            order = FlightOrder(
                id=OrderId.generate(),
                customer=customer,
                passengers=passengers,
                flights=flights,
                price=price,
            )
            for flight in flights:
                flight.add_passengers(passengers)

        customer.add_order(order)
        return order

    def _validate(
        self,
        customer: Customer,
        passengers: Sequence[Passenger],
        flights: Sequence[ScheduledFlight],
    ) -> None:
        if customer.name in self._no_fly_list:
            raise InvalidOrder(OrderRule.NO_FLY, customer.name)

        for passenger in passengers:
            if passenger.name in self._no_fly_list:
                raise InvalidOrder(OrderRule.NO_FLY, passenger.name)

        for flight in flights:
            if not self._has_room(flight, len(passengers)):
                raise InvalidOrder(OrderRule.CAPACITY, str(flight.number))

    @staticmethod
    def _has_room(flight: ScheduledFlight, passenger_count: int) -> bool:
        try:
            return flight.available_capacity() >= passenger_count
        except CapacityUnknown:
            # 定員が不明な機体は座席数ルール違反として扱う
            return False
