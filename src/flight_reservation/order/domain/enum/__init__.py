from .order_rule import OrderRule
from .order_status import OrderStatus

__all__ = ["OrderRule", "OrderStatus"]
