from .aircraft import (
    Helicopter,
    PassengerAircraft,
    PassengerDrone,
    PassengerPlane,
    create_aircraft,
)
from .entity import Flight, ScheduledFlight
from .exception import CapacityUnknown
from .repository import ScheduledFlightRepository
from .value_object import Airport, FlightNumber, Passenger

__all__ = [
    "Airport",
    "FlightNumber",
    "Passenger",
    "PassengerAircraft",
    "PassengerPlane",
    "Helicopter",
    "PassengerDrone",
    "create_aircraft",
    "Flight",
    "ScheduledFlight",
    "CapacityUnknown",
    "ScheduledFlightRepository",
]
