from __future__ import annotations

from datetime import datetime

from flight_reservation.order.domain.exception import PaymentFailed
from flight_reservation.order.domain.value_object import NoFlyList
from flight_reservation.payment.domain import (
    CreditCard,
    PaymentStrategy,
    Wallet,
    WalletRegistry,
)
from flight_reservation.shared.config import get_settings

from .order import Order


class FlightOrder(Order):
    """フライト注文

    決済手段は注文作成時ではなく決済時に設定する。
    """

    _payment_strategy: PaymentStrategy | None = None

    @classmethod
    def no_fly_list(cls) -> NoFlyList:
        """プロセス全体で共有する搭乗禁止リスト"""
        return NoFlyList.from_settings(get_settings())

    @property
    def payment_strategy(self) -> PaymentStrategy | None:
        return self._payment_strategy

    def process_order(self, payment_strategy: PaymentStrategy) -> bool:
        """注文を決済する

        既に CLOSED の場合は決済手段を呼び出さずに成功を返す（冪等）。

        Raises:
            PaymentFailed: 決済手段が支払いを拒否した場合。注文は OPEN のまま
                再試行できる。
        """
        if self.is_closed:
            return True

        self._payment_strategy = payment_strategy
        if not payment_strategy.pay(self.price):
            raise PaymentFailed(self.id)

        self._close()
        return True

    def process_order_with_credit_card_detail(
        self, number: str, expiration_date: datetime, cvv: str
    ) -> bool:
        return self.process_order(CreditCard(number, expiration_date, cvv))

    def process_order_with_credit_card(self, credit_card: CreditCard) -> bool:
        return self.process_order(credit_card)

    def process_order_with_wallet(
        self,
        email: str,
        password: str,
        registry: WalletRegistry | None = None,
    ) -> bool:
        return self.process_order(Wallet(email, password, registry=registry))
