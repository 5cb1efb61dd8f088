from .flight_order_builder import FlightOrderBuilder

__all__ = ["FlightOrderBuilder"]
