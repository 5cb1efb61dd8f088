from enum import Enum


class OrderRule(str, Enum):
    """注文作成時に検証するビジネスルール"""

    NO_FLY = "NO_FLY"
    CAPACITY = "CAPACITY"
