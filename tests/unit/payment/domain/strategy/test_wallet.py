from flight_reservation.payment.domain import PaymentStrategy, Wallet, WalletRegistry
from flight_reservation.shared.domain import Money


class TestWallet:
    """Wallet のテスト"""

    def test_is_payment_strategy(self):
        assert isinstance(Wallet("john@amazon.eu", "qwerty"), PaymentStrategy)

    def test_pay_with_valid_credentials(self):
        registry = WalletRegistry(accounts={"qwerty": "john@amazon.eu"})
        wallet = Wallet("john@amazon.eu", "qwerty", registry=registry)

        assert wallet.pay(Money.of(500)) is True

    def test_pay_with_wrong_password(self):
        registry = WalletRegistry(accounts={"qwerty": "john@amazon.eu"})
        wallet = Wallet("john@amazon.eu", "wrong", registry=registry)

        assert wallet.pay(Money.of(500)) is False

    def test_email_must_match_exactly(self):
        registry = WalletRegistry(accounts={"qwerty": "john@amazon.eu"})
        wallet = Wallet("JOHN@amazon.eu", "qwerty", registry=registry)

        assert wallet.pay(Money.of(500)) is False

    def test_default_registry_comes_from_settings(self):
        assert Wallet("amanda@ya.com", "amanda1985").pay(Money.of(1)) is True
