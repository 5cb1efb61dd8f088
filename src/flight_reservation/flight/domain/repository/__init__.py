from .scheduled_flight_repository import ScheduledFlightRepository

__all__ = ["ScheduledFlightRepository"]
