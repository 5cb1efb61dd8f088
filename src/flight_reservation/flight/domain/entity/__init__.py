from .flight import Flight
from .scheduled_flight import ScheduledFlight

__all__ = ["Flight", "ScheduledFlight"]
