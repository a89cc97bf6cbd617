"""
Domain models for the billing tracker.
This module exports all domain entities and exceptions.
"""

# Base classes
from .base import (
    BaseEntity,
    DomainException,
    ValidationError,
    BusinessRuleViolation,
    EntityNotFoundError,
    new_id
)

# Domain entities
from .client import Client

from .project import (
    Project,
    Payment,
    WorkStatus,
    PaymentStatus,
    ProjectPriority
)

from .todo import Todo

from .workspace import Workspace

# Value objects
from .value_objects import ValueObject, DateFilter

__all__ = [
    # Base classes
    "BaseEntity",
    "DomainException",
    "ValidationError",
    "BusinessRuleViolation",
    "EntityNotFoundError",
    "new_id",

    # Entities
    "Client",
    "Project",
    "Payment",
    "WorkStatus",
    "PaymentStatus",
    "ProjectPriority",
    "Todo",
    "Workspace",

    # Value objects
    "ValueObject",
    "DateFilter",
]
