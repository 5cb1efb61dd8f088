from flight_reservation.payment.domain.value_object import WalletRegistry
from flight_reservation.shared.config import get_settings
from flight_reservation.shared.domain import Money
from flight_reservation.shared.utils.logger import get_logger

logger = get_logger()


class Wallet:
    """ウォレット決済

    認証情報の照合のみを行い、残高は管理しない。
    """

    def __init__(
        self,
        email: str,
        password: str,
        registry: WalletRegistry | None = None,
    ) -> None:
        self._email = email
        self._password = password
        if registry is None:
            registry = WalletRegistry.from_settings(get_settings())
        self._registry = registry

    @property
    def email(self) -> str:
        return self._email

    def pay(self, amount: Money) -> bool:
        if not self._registry.verify(self._email, self._password):
            logger.warning("Wallet payment declined: invalid credentials")
            return False

        logger.info("Paid using wallet", extra={"amount": str(amount)})
        return True
