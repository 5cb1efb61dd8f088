from abc import abstractmethod

from flight_reservation.flight.domain.entity import ScheduledFlight
from flight_reservation.flight.domain.value_object import FlightNumber
from flight_reservation.shared.domain import Repository


class ScheduledFlightRepository(Repository[ScheduledFlight, FlightNumber]):
    """運航予定フライトのカタログ

    Domain 層で定義し、具象実装は Infrastructure 層で行う。
    """

    @abstractmethod
    def save(self, flight: ScheduledFlight) -> None:
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, flight_number: FlightNumber) -> ScheduledFlight | None:
        """フライト番号で検索する"""
        raise NotImplementedError
