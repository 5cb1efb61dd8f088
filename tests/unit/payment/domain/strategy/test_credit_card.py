from datetime import datetime, timedelta, timezone

import pytest

from flight_reservation.payment.domain import CreditCard, PaymentStrategy
from flight_reservation.shared.domain import Money


class TestCreditCard:
    """CreditCard のテスト"""

    @pytest.fixture
    def create_card(self, now):
        def _factory(
            number: str = "4111111111111111",
            expiration_date: datetime = datetime(2030, 12, 31, tzinfo=timezone.utc),
            cvv: str = "123",
            balance: Money = Money.of(100000),
        ) -> CreditCard:
            return CreditCard(number, expiration_date, cvv, balance=balance, clock=lambda: now)

        return _factory

    def test_is_payment_strategy(self, create_card):
        assert isinstance(create_card(), PaymentStrategy)

    def test_default_balance_comes_from_settings(self, now):
        card = CreditCard("4111", datetime(2030, 1, 1, tzinfo=timezone.utc), "123", clock=lambda: now)
        assert card.balance == Money.of(100000)

    def test_pay_debits_balance(self, create_card):
        """残高 100000 から 500 を支払うと 99500 になる"""
        card = create_card()

        assert card.pay(Money.of(500)) is True
        assert card.balance == Money.of(99500)

    def test_insufficient_funds_returns_false(self, create_card):
        """残高不足は例外ではなく False を返し、残高は変わらない"""
        card = create_card()
        card.pay(Money.of(500))

        assert card.pay(Money.of(150000)) is False
        assert card.balance == Money.of(99500)

    @pytest.mark.parametrize(
        "overrides",
        [
            {"number": ""},
            {"cvv": "000"},
            {"expiration_date": datetime(2025, 12, 31, tzinfo=timezone.utc)},
        ],
    )
    def test_invalid_card_is_declined(self, create_card, overrides):
        card = create_card(**overrides)

        assert card.is_valid is False
        assert card.pay(Money.of(1)) is False
        assert card.balance == Money.of(100000)

    def test_naive_expiration_date_is_treated_as_utc(self, create_card):
        card = create_card(expiration_date=datetime(2030, 1, 1))
        assert card.is_valid is True
        assert card.expiration_date.tzinfo == timezone.utc

    def test_card_expired_before_settlement_is_declined(self, now):
        """生成時に有効でも、決済時点で期限切れなら拒否する"""
        current = [now]
        card = CreditCard(
            "4111",
            now + timedelta(days=1),
            "123",
            clock=lambda: current[0],
        )
        assert card.is_valid is True

        current[0] = now + timedelta(days=2)

        assert card.pay(Money.of(1)) is False
