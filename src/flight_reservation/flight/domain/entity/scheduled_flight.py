import threading
from datetime import datetime
from typing import Iterable

from flight_reservation.flight.domain.aircraft import PassengerAircraft
from flight_reservation.flight.domain.exception import CapacityUnknown
from flight_reservation.flight.domain.value_object import (
    Airport,
    FlightNumber,
    Passenger,
)
from flight_reservation.shared.domain import Money
from flight_reservation.shared.domain.exception import BusinessRuleViolationException

from .flight import Flight


class ScheduledFlight(Flight):
    """運航予定のフライト

    搭乗者の登録先。登録数は機体の乗客定員を超えない。
    フライトはカタログと複数の注文から共有されるため、
    注文の検証と登録は `lock` を保持した状態で行う。
    lock は再入可能で、乗客の登録・削除も同じ lock の下で行う。
    """

    DEFAULT_PRICE = Money.of(100)

    def __init__(
        self,
        number: FlightNumber,
        departure: Airport,
        arrival: Airport,
        aircraft: object,
        departure_time: datetime,
        current_price: Money | None = None,
    ) -> None:
        super().__init__(number, departure, arrival, aircraft)
        self._departure_time = departure_time
        self._current_price = current_price or self.DEFAULT_PRICE
        self._passengers: list[Passenger] = []
        self._lock = threading.RLock()

    @property
    def departure_time(self) -> datetime:
        return self._departure_time

    @property
    def current_price(self) -> Money:
        return self._current_price

    def change_price(self, price: Money) -> None:
        self._current_price = price

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    @property
    def passengers(self) -> tuple[Passenger, ...]:
        return tuple(self._passengers)

    @property
    def enrolled_count(self) -> int:
        return len(self._passengers)

    def _passenger_aircraft(self) -> PassengerAircraft:
        if not isinstance(self.aircraft, PassengerAircraft):
            raise CapacityUnknown(self.number, self.aircraft)
        return self.aircraft

    def capacity(self) -> int:
        """乗客定員

        Raises:
            CapacityUnknown: 機体が定員情報を持たない場合
        """
        return self._passenger_aircraft().passenger_capacity

    def crew_member_capacity(self) -> int:
        """乗員定員

        Raises:
            CapacityUnknown: 機体が定員情報を持たない場合
        """
        return self._passenger_aircraft().crew_capacity

    def available_capacity(self) -> int:
        """空席数（定員 - 登録済み乗客数）"""
        with self._lock:
            return self.capacity() - len(self._passengers)

    def add_passengers(self, passengers: Iterable[Passenger]) -> None:
        """乗客を登録する"""
        new_passengers = list(passengers)
        with self._lock:
            if len(new_passengers) > self.available_capacity():
                raise BusinessRuleViolationException(
                    f"Flight {self.number} cannot take {len(new_passengers)} more passengers"
                )
            self._passengers.extend(new_passengers)

    def remove_passengers(self, passengers: Iterable[Passenger]) -> None:
        """指定された乗客を（同名の登録も含めて）すべて取り除く"""
        removed = set(passengers)
        with self._lock:
            self._passengers = [p for p in self._passengers if p not in removed]
