from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from flight_reservation.shared.utils.validators import to_decimal


@dataclass(frozen=True, order=True)
class Money:
    """金額

    Value Object として不変性を保証。
    単一通貨のみを扱うため通貨情報は持たない。
    """

    amount: Decimal

    def __post_init__(self) -> None:
        # frozen=True でも __post_init__ 内では object.__setattr__ が必要
        object.__setattr__(self, "amount", to_decimal(self.amount))
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")

    def __str__(self) -> str:
        return str(self.amount)

    def subtract(self, other: Money) -> Money:
        """金額を減算する（結果が負になる場合は ValueError）"""
        if other.amount > self.amount:
            raise ValueError(f"Cannot subtract {other} from {self}")
        return Money(amount=self.amount - other.amount)

    def covers(self, other: Money) -> bool:
        """other 以上の金額かどうか"""
        return self.amount >= other.amount

    @classmethod
    def of(cls, amount: Decimal | int | str) -> Money:
        return cls(amount=to_decimal(amount))

    @classmethod
    def zero(cls) -> Money:
        return cls(amount=Decimal("0"))
