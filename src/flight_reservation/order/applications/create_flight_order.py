from flight_reservation.customer.domain import Customer, CustomerRepository
from flight_reservation.flight.domain import (
    FlightNumber,
    ScheduledFlight,
    ScheduledFlightRepository,
)
from flight_reservation.order.applications.request_models import (
    CreateFlightOrderRequest,
)
from flight_reservation.order.domain import (
    FlightOrder,
    FlightOrderBuilder,
    FlightOrderRepository,
    InvalidOrder,
)
from flight_reservation.shared.domain import Money, ResourceNotFoundException
from flight_reservation.shared.utils.logger import get_logger

logger = get_logger()


class CreateFlightOrderService:
    """フライト注文作成ユースケース

    カタログから顧客とフライトを解決し、Builder で注文を組み立てて保存する。
    """

    def __init__(
        self,
        customer_repository: CustomerRepository,
        flight_repository: ScheduledFlightRepository,
        order_repository: FlightOrderRepository,
        builder: FlightOrderBuilder,
    ) -> None:
        self._customer_repository = customer_repository
        self._flight_repository = flight_repository
        self._order_repository = order_repository
        self._builder = builder

    def create(self, request: CreateFlightOrderRequest) -> FlightOrder:
        """注文を作成する

        Raises:
            ResourceNotFoundException: 顧客またはフライトが存在しない場合
            InvalidOrder: 搭乗禁止・座席数のルールに違反した場合
        """
        # 1. カタログから顧客とフライトを解決
        customer = self._find_customer(request.customer_email)
        flights = [self._find_flight(number) for number in request.flight_numbers]

        # 2. Builder で検証・組み立て（フライトへの乗客登録を含む）
        try:
            order = self._builder.build(
                customer,
                request.passenger_names,
                flights,
                Money.of(request.price),
            )
        except InvalidOrder as e:
            logger.warning(
                "Rejected flight order",
                extra={"rule": e.rule.value, "subject": e.subject},
            )
            raise

        # 3. 永続化
        self._order_repository.save(order)
        self._customer_repository.save(customer)

        logger.info(
            "Created flight order",
            extra={
                "order_id": str(order.id),
                "customer_email": customer.email,
                "passenger_count": len(order.passengers),
            },
        )
        return order

    def _find_customer(self, email: str) -> Customer:
        customer = self._customer_repository.find_by_id(email)
        if customer is None:
            raise ResourceNotFoundException(f"Customer not found: {email}")
        return customer

    def _find_flight(self, number: str) -> ScheduledFlight:
        flight = self._flight_repository.find_by_id(FlightNumber(number))
        if flight is None:
            raise ResourceNotFoundException(f"Flight not found: {number}")
        return flight
