from enum import Enum


class OrderStatus(str, Enum):
    """注文ステータス（OPEN -> CLOSED の一方向のみ）"""

    OPEN = "OPEN"
    CLOSED = "CLOSED"
