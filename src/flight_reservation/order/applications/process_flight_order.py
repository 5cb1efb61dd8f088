from flight_reservation.order.applications.request_models import (
    CreditCardPaymentRequest,
    WalletPaymentRequest,
)
from flight_reservation.order.domain import (
    FlightOrder,
    FlightOrderRepository,
    OrderId,
    PaymentFailed,
)
from flight_reservation.payment.domain import (
    CreditCard,
    PaymentStrategy,
    Wallet,
    WalletRegistry,
)
from flight_reservation.shared.domain import ResourceNotFoundException
from flight_reservation.shared.utils.logger import get_logger

logger = get_logger()


class ProcessFlightOrderService:
    """フライト注文の決済ユースケース"""

    def __init__(
        self,
        repository: FlightOrderRepository,
        wallet_registry: WalletRegistry,
    ) -> None:
        self._repository = repository
        self._wallet_registry = wallet_registry

    def pay_with_credit_card(
        self, order_id: OrderId, request: CreditCardPaymentRequest
    ) -> FlightOrder:
        card = CreditCard(request.number, request.expiration_date, request.cvv)
        return self._process(order_id, card)

    def pay_with_wallet(
        self, order_id: OrderId, request: WalletPaymentRequest
    ) -> FlightOrder:
        wallet = Wallet(request.email, request.password, registry=self._wallet_registry)
        return self._process(order_id, wallet)

    def _process(self, order_id: OrderId, strategy: PaymentStrategy) -> FlightOrder:
        """注文を決済して保存する

        Raises:
            ResourceNotFoundException: 注文が存在しない場合
            PaymentFailed: 決済が拒否された場合（注文は OPEN のまま）
        """
        order = self._repository.find_by_id(order_id)
        if order is None:
            raise ResourceNotFoundException(f"Order not found: {order_id}")

        if order.is_closed:
            logger.info("Order is already closed", extra={"order_id": str(order_id)})
            return order

        try:
            order.process_order(strategy)
        except PaymentFailed:
            logger.warning("Payment failed", extra={"order_id": str(order_id)})
            raise

        self._repository.save(order)
        logger.info("Settled flight order", extra={"order_id": str(order_id)})
        return order
