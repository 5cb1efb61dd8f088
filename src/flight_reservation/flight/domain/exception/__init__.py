from .exceptions import CapacityUnknown

__all__ = ["CapacityUnknown"]
