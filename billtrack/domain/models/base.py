"""
Base entity and exceptions for the domain layer.
This module contains the foundational classes for all domain entities.
"""

from datetime import date, datetime
from enum import Enum
from typing import Optional, Any, Dict
from dataclasses import dataclass, fields
import uuid


def new_id() -> str:
    """Generate a fresh unique entity id."""
    return str(uuid.uuid4())


def _serialize(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, BaseEntity):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [_serialize(item) for item in value]
    return value


@dataclass(frozen=True)
class BaseEntity:
    """
    Base class for all domain entities.

    Entities are immutable snapshots: every change produces a new instance
    through ``dataclasses.replace`` so that callers can swap whole
    collections as the new source of truth.
    """

    id: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert entity to dictionary representation."""
        return {f.name: _serialize(getattr(self, f.name)) for f in fields(self)}


class DomainException(Exception):
    """Base exception for domain errors."""

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class ValidationError(DomainException):
    """Exception raised when input validation fails."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, "VALIDATION_ERROR")
        self.field = field


class BusinessRuleViolation(DomainException):
    """Exception raised when a business rule is violated."""

    def __init__(self, message: str):
        super().__init__(message, "BUSINESS_RULE_VIOLATION")


class EntityNotFoundError(DomainException):
    """Exception raised when an entity is not found."""

    def __init__(self, entity_type: str, entity_id: Any):
        message = f"{entity_type} with id {entity_id} not found"
        super().__init__(message, "ENTITY_NOT_FOUND")
        self.entity_type = entity_type
        self.entity_id = entity_id
