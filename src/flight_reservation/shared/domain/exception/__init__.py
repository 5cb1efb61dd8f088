from .exceptions import (
    BusinessRuleViolationException,
    DomainException,
    ResourceNotFoundException,
)

__all__ = [
    "DomainException",
    "ResourceNotFoundException",
    "BusinessRuleViolationException",
]
