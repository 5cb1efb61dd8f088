from .exceptions import InvalidOrder, PaymentFailed

__all__ = ["InvalidOrder", "PaymentFailed"]
