from flight_reservation.flight.domain.entity import ScheduledFlight
from flight_reservation.flight.domain.repository import ScheduledFlightRepository
from flight_reservation.flight.domain.value_object import FlightNumber


class InMemoryScheduledFlightRepository(ScheduledFlightRepository):
    """プロセス内の辞書を使用した ScheduledFlightRepository の具象実装

    同じインスタンスを返すため、注文による乗客登録がカタログにも反映される。
    """

    def __init__(self) -> None:
        self._flights: dict[FlightNumber, ScheduledFlight] = {}

    def save(self, flight: ScheduledFlight) -> None:
        self._flights[flight.number] = flight

    def find_by_id(self, flight_number: FlightNumber) -> ScheduledFlight | None:
        return self._flights.get(flight_number)
