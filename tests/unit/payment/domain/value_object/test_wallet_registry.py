from flight_reservation.payment.domain import WalletRegistry


class TestWalletRegistry:
    """WalletRegistry のテスト"""

    def test_verify(self):
        registry = WalletRegistry(accounts={"qwerty": "john@amazon.eu"})

        assert registry.verify("john@amazon.eu", "qwerty")
        assert not registry.verify("john@amazon.eu", "wrong")
        assert not registry.verify("amanda@ya.com", "qwerty")

    def test_registry_is_read_only(self):
        """生成元の辞書を変更しても登録内容は変わらない"""
        source = {"qwerty": "john@amazon.eu"}
        registry = WalletRegistry(accounts=source)

        source["qwerty"] = "mallory@example.com"

        assert registry.verify("john@amazon.eu", "qwerty")
