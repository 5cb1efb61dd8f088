from .builder import FlightOrderBuilder
from .entity import FlightOrder, Order
from .enum import OrderRule, OrderStatus
from .exception import InvalidOrder, PaymentFailed
from .repository import FlightOrderRepository
from .value_object import NoFlyList, OrderId

__all__ = [
    "Order",
    "FlightOrder",
    "FlightOrderBuilder",
    "OrderId",
    "OrderRule",
    "OrderStatus",
    "NoFlyList",
    "InvalidOrder",
    "PaymentFailed",
    "FlightOrderRepository",
]
