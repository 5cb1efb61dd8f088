from abc import abstractmethod

from flight_reservation.order.domain.entity import FlightOrder
from flight_reservation.order.domain.value_object import OrderId
from flight_reservation.shared.domain import Repository


class FlightOrderRepository(Repository[FlightOrder, OrderId]):
    """フライト注文リポジトリのインターフェース"""

    @abstractmethod
    def save(self, order: FlightOrder) -> None:
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, order_id: OrderId) -> FlightOrder | None:
        raise NotImplementedError

    @abstractmethod
    def find_by_customer_email(self, email: str) -> list[FlightOrder]:
        """顧客のメールアドレスで注文を検索する（作成順）"""
        raise NotImplementedError
