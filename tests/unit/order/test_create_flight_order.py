from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from flight_reservation.customer.infrastructure.in_memory_customer_repository import (
    InMemoryCustomerRepository,
)
from flight_reservation.flight.infrastructure.in_memory_scheduled_flight_repository import (
    InMemoryScheduledFlightRepository,
)
from flight_reservation.order.applications.create_flight_order import (
    CreateFlightOrderService,
)
from flight_reservation.order.applications.request_models import (
    CreateFlightOrderRequest,
)
from flight_reservation.order.domain import FlightOrder, InvalidOrder, OrderStatus
from flight_reservation.order.infrastructure.in_memory_flight_order_repository import (
    InMemoryFlightOrderRepository,
)
from flight_reservation.shared.domain import Money, ResourceNotFoundException


class TestCreateFlightOrderService:
    """CreateFlightOrderService のテスト"""

    @pytest.fixture
    def catalog(self, create_customer, create_scheduled_flight):
        customers = InMemoryCustomerRepository()
        flights = InMemoryScheduledFlightRepository()
        customers.save(create_customer(name="Alice", email="alice@example.com"))
        customers.save(create_customer(name="Peter", email="peter@example.com"))
        flights.save(create_scheduled_flight("NH001"))
        flights.save(create_scheduled_flight("NH002"))
        return customers, flights

    @pytest.fixture
    def service(self, catalog, builder, mock_repository):
        customers, flights = catalog
        return CreateFlightOrderService(
            customer_repository=customers,
            flight_repository=flights,
            order_repository=mock_repository,
            builder=builder,
        )

    def test_create_builds_and_saves_order(self, service, catalog, mock_repository):
        """注文が作成され、Repository に保存され、Entity が返される"""
        customers, flights = catalog
        request = CreateFlightOrderRequest(
            customer_email="alice@example.com",
            passenger_names=["Alice", "Bob"],
            flight_numbers=["NH001", "nh002"],
            price=Decimal("250"),
        )

        order = service.create(request)

        assert isinstance(order, FlightOrder)
        assert order.status == OrderStatus.OPEN
        assert order.price == Money.of(250)
        mock_repository.save.assert_called_once()
        saved_order = mock_repository.save.call_args[0][0]
        assert saved_order == order

        customer = customers.find_by_id("alice@example.com")
        assert customer.orders == (order,)
        for flight in order.flights:
            assert flight.enrolled_count == 2

    def test_rejected_order_is_not_saved(self, service, mock_repository):
        request = CreateFlightOrderRequest(
            customer_email="peter@example.com",
            passenger_names=["Alice"],
            flight_numbers=["NH001"],
            price=100,
        )

        with pytest.raises(InvalidOrder):
            service.create(request)

        mock_repository.save.assert_not_called()

    def test_unknown_customer_raises_not_found(self, service):
        request = CreateFlightOrderRequest(
            customer_email="nobody@example.com",
            passenger_names=["Alice"],
            flight_numbers=["NH001"],
            price=100,
        )

        with pytest.raises(ResourceNotFoundException, match="Customer not found"):
            service.create(request)

    def test_unknown_flight_raises_not_found(self, service, catalog):
        _, flights = catalog
        request = CreateFlightOrderRequest(
            customer_email="alice@example.com",
            passenger_names=["Alice"],
            flight_numbers=["NH001", "NH999"],
            price=100,
        )

        with pytest.raises(ResourceNotFoundException, match="Flight not found"):
            service.create(request)

    def test_end_to_end_with_in_memory_order_repository(self, catalog, builder):
        customers, flights = catalog
        orders = InMemoryFlightOrderRepository()
        service = CreateFlightOrderService(
            customer_repository=customers,
            flight_repository=flights,
            order_repository=orders,
            builder=builder,
        )

        order = service.create(
            CreateFlightOrderRequest(
                customer_email="alice@example.com",
                passenger_names=["Alice"],
                flight_numbers=["NH001"],
                price=100,
            )
        )

        assert orders.find_by_id(order.id) is order
        assert orders.find_by_customer_email("alice@example.com") == [order]


class TestCreateFlightOrderRequest:
    @pytest.mark.parametrize(
        "overrides",
        [
            {"passenger_names": []},
            {"flight_numbers": []},
            {"price": -1},
            {"passenger_names": ["  "]},
            {"customer_email": ""},
        ],
    )
    def test_invalid_request_raises_validation_error(self, overrides):
        payload = {
            "customer_email": "alice@example.com",
            "passenger_names": ["Alice"],
            "flight_numbers": ["NH001"],
            "price": 100,
        }
        payload.update(overrides)

        with pytest.raises(ValidationError):
            CreateFlightOrderRequest(**payload)

    def test_price_is_converted_to_decimal(self):
        request = CreateFlightOrderRequest(
            customer_email="alice@example.com",
            passenger_names=["Alice"],
            flight_numbers=["NH001"],
            price=99.5,
        )
        assert request.price == Decimal("99.5")
