from .entity import Entity
from .exception import (
    BusinessRuleViolationException,
    DomainException,
    ResourceNotFoundException,
)
from .repository import Repository
from .value_object import Money

__all__ = [
    "Entity",
    "Repository",
    "DomainException",
    "ResourceNotFoundException",
    "BusinessRuleViolationException",
    "Money",
]
