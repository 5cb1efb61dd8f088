from .entity import Customer
from .repository import CustomerRepository

__all__ = ["Customer", "CustomerRepository"]
