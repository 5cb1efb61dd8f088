from flight_reservation.shared.domain.exception import DomainException


class CapacityUnknown(DomainException):
    """機体が定員情報を持たない場合（貨物機など）"""

    def __init__(self, flight_number: object, aircraft: object) -> None:
        self.flight_number = flight_number
        self.aircraft = aircraft
        super().__init__(
            f"Aircraft of flight {flight_number} has no information about its capacity"
        )
