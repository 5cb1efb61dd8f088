from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Sequence

from flight_reservation.flight.domain import Passenger, ScheduledFlight
from flight_reservation.order.domain.enum import OrderStatus
from flight_reservation.order.domain.value_object import OrderId
from flight_reservation.payment.domain import PaymentStrategy
from flight_reservation.shared.domain import Entity, Money

if TYPE_CHECKING:
    from flight_reservation.customer.domain import Customer


class Order(Entity[OrderId]):
    """注文の集約ルート

    - フライトは参照のみ保持する（カタログと共有）
    - 価格・乗客・フライトは生成後に変更できない
    - ステータスは OPEN -> CLOSED の一度だけ遷移する
    """

    def __init__(
        self,
        id: OrderId,
        customer: Customer,
        passengers: Sequence[Passenger],
        flights: Sequence[ScheduledFlight],
        price: Money,
        status: OrderStatus = OrderStatus.OPEN,
    ) -> None:
        super().__init__(id)
        self._customer = customer
        self._passengers = tuple(passengers)
        self._flights = tuple(flights)
        self._price = price
        self._status = status

    @property
    def customer(self) -> Customer:
        return self._customer

    @property
    def passengers(self) -> tuple[Passenger, ...]:
        return self._passengers

    @property
    def flights(self) -> tuple[ScheduledFlight, ...]:
        return self._flights

    @property
    def price(self) -> Money:
        return self._price

    @property
    def status(self) -> OrderStatus:
        return self._status

    @property
    def is_closed(self) -> bool:
        return self._status == OrderStatus.CLOSED

    def _close(self) -> None:
        self._status = OrderStatus.CLOSED

    @abstractmethod
    def process_order(self, payment_strategy: PaymentStrategy) -> bool:
        """注文を決済する"""
        raise NotImplementedError
