from datetime import datetime, timezone
from typing import Callable

from flight_reservation.shared.config import get_settings
from flight_reservation.shared.domain import Money
from flight_reservation.shared.utils.logger import get_logger

logger = get_logger()

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _as_aware(value: datetime) -> datetime:
    # タイムゾーン無しの有効期限は UTC とみなす
    return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)


class CreditCard:
    """クレジットカード決済

    有効性（番号・有効期限・セキュリティコード）は生成時に判定する。
    決済時には有効期限を再確認し、残高から金額を差し引く。
    """

    def __init__(
        self,
        number: str,
        expiration_date: datetime,
        cvv: str,
        balance: Money | None = None,
        clock: Clock = _utc_now,
    ) -> None:
        settings = get_settings()
        self._number = number
        self._expiration_date = _as_aware(expiration_date)
        self._cvv = cvv
        self._balance = balance if balance is not None else Money.of(
            settings.card_initial_balance
        )
        self._clock = clock
        self._valid = (
            len(number) > 0
            and self._expiration_date > self._clock()
            and cvv != settings.invalid_cvv
        )

    @property
    def number(self) -> str:
        return self._number

    @property
    def expiration_date(self) -> datetime:
        return self._expiration_date

    @property
    def balance(self) -> Money:
        return self._balance

    @property
    def is_valid(self) -> bool:
        return self._valid

    def pay(self, amount: Money) -> bool:
        """残高から amount を差し引く。無効・期限切れ・残高不足なら False"""
        if not self._valid or self._expiration_date <= self._clock():
            logger.warning("Credit card payment declined: invalid card")
            return False
        if not self._balance.covers(amount):
            logger.warning(
                "Credit card payment declined: insufficient funds",
                extra={"amount": str(amount), "balance": str(self._balance)},
            )
            return False

        self._balance = self._balance.subtract(amount)
        logger.info("Paid using credit card", extra={"amount": str(amount)})
        return True
