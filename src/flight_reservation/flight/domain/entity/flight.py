from flight_reservation.flight.domain.value_object import Airport, FlightNumber
from flight_reservation.shared.domain import Entity
from flight_reservation.shared.domain.exception import BusinessRuleViolationException


class Flight(Entity[FlightNumber]):
    """フライト（路線 + 機体）

    機体は任意のオブジェクトを受け付ける。定員を持つかどうかは
    ScheduledFlight が問い合わせた時点で判定する。
    """

    def __init__(
        self,
        number: FlightNumber,
        departure: Airport,
        arrival: Airport,
        aircraft: object,
    ) -> None:
        super().__init__(number)
        self._departure = departure
        self._arrival = arrival
        self._aircraft = aircraft

        if self._departure == self._arrival:
            raise BusinessRuleViolationException(
                "Departure and arrival airports must be different"
            )

    @property
    def number(self) -> FlightNumber:
        return self.id

    @property
    def departure(self) -> Airport:
        return self._departure

    @property
    def arrival(self) -> Airport:
        return self._arrival

    @property
    def aircraft(self) -> object:
        return self._aircraft
