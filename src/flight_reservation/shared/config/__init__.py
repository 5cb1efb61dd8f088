from .settings import ReservationSettings, get_settings

__all__ = ["ReservationSettings", "get_settings"]
