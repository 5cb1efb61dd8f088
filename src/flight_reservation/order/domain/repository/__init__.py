from .flight_order_repository import FlightOrderRepository

__all__ = ["FlightOrderRepository"]
