from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from flight_reservation.customer.domain import Customer
from flight_reservation.flight.domain import (
    Airport,
    FlightNumber,
    PassengerDrone,
    PassengerPlane,
    ScheduledFlight,
)
from flight_reservation.order.domain import FlightOrderBuilder, NoFlyList

NOW = datetime(2026, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def now():
    """決済時刻として使う固定の現在時刻"""
    return NOW


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def no_fly_list():
    return NoFlyList.of(["Peter", "Johannes"])


@pytest.fixture
def builder(no_fly_list):
    return FlightOrderBuilder(no_fly_list=no_fly_list)


@pytest.fixture
def create_customer():
    """Customer を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(name: str = "Alice", email: str = "alice@example.com") -> Customer:
        return Customer(name=name, email=email)

    return _factory


@pytest.fixture
def create_scheduled_flight():
    """ScheduledFlight を生成する Factory fixture

    既定の機体は定員4名の PassengerDrone。
    """

    def _factory(
        flight_number: str = "NH001",
        aircraft: object = None,
        departure: str = "HND",
        arrival: str = "ITM",
    ) -> ScheduledFlight:
        return ScheduledFlight(
            number=FlightNumber(flight_number),
            departure=Airport(code=departure, name=departure, location="Japan"),
            arrival=Airport(code=arrival, name=arrival, location="Japan"),
            aircraft=aircraft if aircraft is not None else PassengerDrone("HypaHype"),
            departure_time=datetime(2026, 3, 1, 10, 0, tzinfo=timezone.utc),
        )

    return _factory


@pytest.fixture
def large_plane():
    return PassengerPlane("A380")
