"""
Project domain model.
Represents a billable project for a client with its payment history.
"""

from dataclasses import dataclass, field
import datetime as dt
from typing import Optional, Tuple
from enum import Enum

from billtrack.domain.models.base import BaseEntity, new_id


class WorkStatus(str, Enum):
    """Lifecycle stage of project delivery."""
    QUOTE_TO_SEND = "quote_to_send"
    QUOTE_SENT = "quote_sent"
    IN_PROGRESS = "in_progress"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class PaymentStatus(str, Enum):
    """Billing and collection stage."""
    TO_INVOICE = "to_invoice"
    INVOICED = "invoiced"
    PARTIALLY_PAID = "partially_paid"
    PAID = "paid"


class ProjectPriority(str, Enum):
    """Project priority levels."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        """Numeric weight, higher is more urgent."""
        return _PRIORITY_RANK[self]


_PRIORITY_RANK = {
    ProjectPriority.LOW: 1,
    ProjectPriority.MEDIUM: 2,
    ProjectPriority.HIGH: 3,
}


@dataclass(frozen=True)
class Payment(BaseEntity):
    """A single amount collected for a project."""

    amount: float = 0.0
    date: Optional[dt.date] = None
    notes: Optional[str] = None

    @classmethod
    def create(cls, amount: float, payment_date: dt.date, notes: Optional[str] = None) -> "Payment":
        """Create a payment with a fresh id."""
        return cls(id=new_id(), amount=amount, date=payment_date, notes=notes)


@dataclass(frozen=True)
class Project(BaseEntity):
    """
    Project aggregate.

    ``payment_status`` is a cached value: it must be recomputed through
    ``payment_status_service`` whenever ``payments`` change.
    """

    client_id: str = ""
    name: str = ""
    value: float = 0.0
    work_status: WorkStatus = WorkStatus.QUOTE_TO_SEND
    payment_status: PaymentStatus = PaymentStatus.TO_INVOICE
    priority: ProjectPriority = ProjectPriority.MEDIUM
    created_at: Optional[dt.datetime] = None
    notes: Optional[str] = None
    paid_at: Optional[dt.datetime] = None
    payments: Tuple[Payment, ...] = field(default_factory=tuple)

    @classmethod
    def create(
        cls,
        client_id: str,
        name: str,
        value: float,
        now: dt.datetime,
        notes: Optional[str] = None,
        priority: ProjectPriority = ProjectPriority.MEDIUM
    ) -> "Project":
        """Create a new project at quote stage with no payments."""
        return cls(
            id=new_id(),
            client_id=client_id,
            name=name,
            value=value,
            priority=priority,
            created_at=now,
            notes=notes or None,
        )

    @property
    def is_cancelled(self) -> bool:
        return self.work_status == WorkStatus.CANCELLED

    @property
    def is_paid(self) -> bool:
        return self.payment_status == PaymentStatus.PAID

    @property
    def is_closed(self) -> bool:
        """Delivered and fully paid."""
        return self.work_status == WorkStatus.DELIVERED and self.is_paid

    @property
    def is_active(self) -> bool:
        """Active projects are neither cancelled nor closed."""
        return not self.is_cancelled and not self.is_closed

    def get_payment(self, payment_id: str) -> Optional[Payment]:
        for payment in self.payments:
            if payment.id == payment_id:
                return payment
        return None
