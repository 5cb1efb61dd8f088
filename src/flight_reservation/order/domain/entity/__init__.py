from .flight_order import FlightOrder
from .order import Order

__all__ = ["Order", "FlightOrder"]
