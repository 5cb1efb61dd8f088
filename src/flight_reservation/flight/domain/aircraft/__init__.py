from .aircraft_factory import create_aircraft
from .helicopter import Helicopter
from .passenger_aircraft import PassengerAircraft
from .passenger_drone import PassengerDrone
from .passenger_plane import PassengerPlane

__all__ = [
    "PassengerAircraft",
    "PassengerPlane",
    "Helicopter",
    "PassengerDrone",
    "create_aircraft",
]
