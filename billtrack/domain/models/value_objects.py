"""
Value objects for the domain layer.
Immutable objects compared by value.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import Optional

from billtrack.domain.models.base import ValidationError


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects.
    Value objects are immutable and are compared by their values.
    """

    def __post_init__(self):
        """Validate value object after creation."""
        self.validate()

    @abstractmethod
    def validate(self) -> None:
        """Validate the value object's state."""
        pass


@dataclass(frozen=True)
class DateFilter(ValueObject):
    """
    Year/month filter for dashboard figures.
    ``None`` on either field means "all".
    """

    year: Optional[int] = None
    month: Optional[int] = None

    def validate(self) -> None:
        """Validate month range."""
        if self.month is not None and not 1 <= self.month <= 12:
            raise ValidationError("Month must be between 1 and 12", "month")

    @classmethod
    def all(cls) -> "DateFilter":
        return cls()

    @property
    def is_unfiltered(self) -> bool:
        return self.year is None and self.month is None

    def matches(self, value: Optional[date]) -> bool:
        """Check whether a date falls within the filter."""
        if self.is_unfiltered:
            return True
        if value is None:
            return False
        year_match = self.year is None or value.year == self.year
        month_match = self.month is None or value.month == self.month
        return year_match and month_match
