from flight_reservation.order.domain.entity import FlightOrder
from flight_reservation.order.domain.repository import FlightOrderRepository
from flight_reservation.order.domain.value_object import OrderId


class InMemoryFlightOrderRepository(FlightOrderRepository):
    """プロセス内の辞書を使用した FlightOrderRepository の具象実装"""

    def __init__(self) -> None:
        self._orders: dict[OrderId, FlightOrder] = {}

    def save(self, order: FlightOrder) -> None:
        self._orders[order.id] = order

    def find_by_id(self, order_id: OrderId) -> FlightOrder | None:
        return self._orders.get(order_id)

    def find_by_customer_email(self, email: str) -> list[FlightOrder]:
        return [order for order in self._orders.values() if order.customer.email == email]
