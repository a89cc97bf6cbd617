"""
Todo domain model.
A unit of work within a project that may contribute extra income.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from billtrack.domain.models.base import BaseEntity, new_id


@dataclass(frozen=True)
class Todo(BaseEntity):
    """Project to-do item."""

    project_id: str = ""
    task: str = ""
    income: float = 0.0
    completed: bool = False
    due_date: Optional[date] = None
    # Manual sort key written by drag reordering; absent on legacy records
    order: Optional[int] = None

    @classmethod
    def create(
        cls,
        project_id: str,
        task: str,
        income: float = 0.0,
        due_date: Optional[date] = None
    ) -> "Todo":
        """Create an open todo with a fresh id."""
        return cls(
            id=new_id(),
            project_id=project_id,
            task=task,
            income=income,
            due_date=due_date,
        )

    @property
    def effective_order(self) -> int:
        return self.order if self.order is not None else 0
