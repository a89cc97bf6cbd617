"""Payment status service.
Keeps a project's cached payment status consistent with its payments.
"""

import logging
from dataclasses import replace
from datetime import datetime
from typing import Iterable, Optional

from billtrack.domain.models.base import EntityNotFoundError
from billtrack.domain.models.project import Project, Payment, PaymentStatus
from billtrack.domain.models.todo import Todo
from billtrack.domain.services.financial_service import FinancialService

logger = logging.getLogger(__name__)


class PaymentStatusService:
    """
    Domain service applying the payment status rule.

    Adding and removing a payment both go through ``recalculate`` so the two
    call sites can never drift apart.
    """

    def __init__(self, financial_service: Optional[FinancialService] = None):
        self.financial_service = financial_service or FinancialService()

    def resolve_status(
        self,
        current: PaymentStatus,
        total: float,
        paid: float
    ) -> PaymentStatus:
        """
        Derive the payment status from the project total and the paid amount.

        With nothing paid, a project that was never invoiced stays TO_INVOICE;
        any other status falls back to INVOICED.
        """
        if paid <= 0:
            if current == PaymentStatus.TO_INVOICE:
                return current
            return PaymentStatus.INVOICED
        if paid < total:
            return PaymentStatus.PARTIALLY_PAID
        return PaymentStatus.PAID

    def apply_status(self, project: Project, status: PaymentStatus, now: datetime) -> Project:
        """
        Return a copy of the project with the new status and paid_at adjusted.

        paid_at is stamped when entering PAID, kept while PAID, and cleared
        for any other status.
        """
        if status == PaymentStatus.PAID:
            paid_at = project.paid_at if project.is_paid and project.paid_at else now
        else:
            paid_at = None

        if status != project.payment_status:
            logger.debug(
                f"Project {project.id} payment status "
                f"{project.payment_status.value} -> {status.value}"
            )
        return replace(project, payment_status=status, paid_at=paid_at)

    def recalculate(self, project: Project, todos: Iterable[Todo], now: datetime) -> Project:
        """Re-run the status rule against the project's current payments."""
        total = self.financial_service.project_total(project, todos)
        paid = self.financial_service.paid_amount(project)
        status = self.resolve_status(project.payment_status, total, paid)
        return self.apply_status(project, status, now)

    def add_payment(
        self,
        project: Project,
        payment: Payment,
        todos: Iterable[Todo],
        now: datetime
    ) -> Project:
        """Append a payment and recompute the payment status."""
        updated = replace(project, payments=tuple(project.payments or ()) + (payment,))
        return self.recalculate(updated, todos, now)

    def remove_payment(
        self,
        project: Project,
        payment_id: str,
        todos: Iterable[Todo],
        now: datetime
    ) -> Project:
        """Drop a payment by id and recompute the payment status."""
        if project.get_payment(payment_id) is None:
            raise EntityNotFoundError("Payment", payment_id)

        updated = replace(
            project,
            payments=tuple(p for p in project.payments if p.id != payment_id)
        )
        return self.recalculate(updated, todos, now)

    def set_manual_status(self, project: Project, status: PaymentStatus, now: datetime) -> Project:
        """
        Apply a status picked by the user.
        Bypasses the payment-derived rule but keeps the paid_at bookkeeping.
        """
        return self.apply_status(project, status, now)
