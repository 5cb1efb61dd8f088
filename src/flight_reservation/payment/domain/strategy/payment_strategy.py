from typing import Protocol, runtime_checkable

from flight_reservation.shared.domain import Money


@runtime_checkable
class PaymentStrategy(Protocol):
    """決済手段

    決済に成功した場合は True、拒否された場合は False を返す。
    残高不足などで例外は送出しない（呼び出し側が別の手段で再試行できるように）。
    """

    def pay(self, amount: Money) -> bool: ...
