from .no_fly_list import NoFlyList
from .order_id import OrderId

__all__ = ["NoFlyList", "OrderId"]
