from .airport import Airport
from .flight_number import FlightNumber
from .passenger import Passenger

__all__ = ["Airport", "FlightNumber", "Passenger"]
