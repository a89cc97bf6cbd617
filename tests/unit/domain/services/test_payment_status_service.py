"""
Unit tests for PaymentStatusService domain service.
"""

import pytest
from datetime import date, datetime

from billtrack.domain.models.base import EntityNotFoundError
from billtrack.domain.models.project import Payment, PaymentStatus, Project, WorkStatus
from billtrack.domain.models.todo import Todo
from billtrack.domain.services.payment_status_service import PaymentStatusService


NOW = datetime(2024, 5, 1, 12, 0)
LATER = datetime(2024, 6, 1, 12, 0)


class TestResolveStatus:
    """Test cases for the payment status rule."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = PaymentStatusService()

    def test_nothing_paid_keeps_to_invoice(self):
        """Test a never invoiced project stays TO_INVOICE."""
        assert self.service.resolve_status(PaymentStatus.TO_INVOICE, 1000, 0) == PaymentStatus.TO_INVOICE

    @pytest.mark.parametrize("current", [
        PaymentStatus.INVOICED,
        PaymentStatus.PARTIALLY_PAID,
        PaymentStatus.PAID,
    ])
    def test_nothing_paid_falls_back_to_invoiced(self, current):
        """Test any other status becomes INVOICED when nothing is paid."""
        assert self.service.resolve_status(current, 1000, 0) == PaymentStatus.INVOICED

    def test_partial_payment(self):
        """Test paid below total is PARTIALLY_PAID."""
        assert self.service.resolve_status(PaymentStatus.TO_INVOICE, 1000, 300) == PaymentStatus.PARTIALLY_PAID

    def test_full_and_over_payment(self):
        """Test paid at or above total is PAID."""
        assert self.service.resolve_status(PaymentStatus.INVOICED, 1000, 1000) == PaymentStatus.PAID
        assert self.service.resolve_status(PaymentStatus.INVOICED, 1000, 1200) == PaymentStatus.PAID

    def test_zero_total_with_payment_is_paid(self):
        """Test any positive payment settles a zero-valued project."""
        assert self.service.resolve_status(PaymentStatus.TO_INVOICE, 0, 10) == PaymentStatus.PAID


class TestPaymentStatusService:
    """Test cases for payment mutations and paid_at bookkeeping."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = PaymentStatusService()
        self.project = Project(
            id="p1",
            client_id="c1",
            value=1000.0,
            work_status=WorkStatus.DELIVERED,
            payment_status=PaymentStatus.INVOICED,
        )

    def test_full_payment_marks_paid(self):
        """Test a payment covering the total marks the project PAID with paid_at."""
        payment = Payment(id="pay1", amount=1000.0, date=date(2024, 5, 1))

        updated = self.service.add_payment(self.project, payment, [], NOW)

        assert updated.payment_status == PaymentStatus.PAID
        assert updated.paid_at == NOW
        assert updated.payments == (payment,)
        assert self.project.payments == ()

    def test_removing_only_payment_reverts_to_invoiced(self):
        """Test removing the payment of a paid project reverts to INVOICED."""
        payment = Payment(id="pay1", amount=1000.0, date=date(2024, 5, 1))
        paid = self.service.add_payment(self.project, payment, [], NOW)

        reverted = self.service.remove_payment(paid, "pay1", [], LATER)

        assert reverted.payment_status == PaymentStatus.INVOICED
        assert reverted.paid_at is None
        assert reverted.payments == ()

    def test_partial_payment(self):
        """Test a partial payment leaves PARTIALLY_PAID without paid_at."""
        payment = Payment(id="pay1", amount=300.0, date=date(2024, 5, 1))

        updated = self.service.add_payment(self.project, payment, [], NOW)

        assert updated.payment_status == PaymentStatus.PARTIALLY_PAID
        assert updated.paid_at is None

    def test_todo_income_raises_the_bar(self):
        """Test todo income counts toward the total being paid."""
        todos = [Todo(id="t1", project_id="p1", income=500.0)]
        payment = Payment(id="pay1", amount=1000.0, date=date(2024, 5, 1))

        updated = self.service.add_payment(self.project, payment, todos, NOW)

        assert updated.payment_status == PaymentStatus.PARTIALLY_PAID

    def test_recalculate_is_idempotent(self):
        """Test running the rule twice changes nothing, paid_at included."""
        payment = Payment(id="pay1", amount=1000.0, date=date(2024, 5, 1))
        paid = self.service.add_payment(self.project, payment, [], NOW)

        again = self.service.recalculate(paid, [], LATER)

        assert again == paid
        assert again.paid_at == NOW

    def test_to_invoice_project_stays_to_invoice_without_payments(self):
        """Test removing the last payment of a never invoiced project."""
        project = Project(id="p2", value=500.0)
        payment = Payment(id="pay1", amount=100.0, date=date(2024, 5, 1))
        partial = self.service.add_payment(project, payment, [], NOW)
        assert partial.payment_status == PaymentStatus.PARTIALLY_PAID

        reverted = self.service.remove_payment(partial, "pay1", [], NOW)

        # Status was PARTIALLY_PAID, so the rule falls back to INVOICED
        assert reverted.payment_status == PaymentStatus.INVOICED
        assert self.service.recalculate(project, [], NOW).payment_status == PaymentStatus.TO_INVOICE

    def test_paid_round_trip_restamps_paid_at(self):
        """Test leaving PAID clears paid_at and re-entering stamps it again."""
        first = Payment(id="pay1", amount=1000.0, date=date(2024, 5, 1))
        paid = self.service.add_payment(self.project, first, [], NOW)

        partial = self.service.set_manual_status(paid, PaymentStatus.PARTIALLY_PAID, NOW)
        repaid = self.service.recalculate(partial, [], LATER)

        assert partial.paid_at is None
        assert repaid.payment_status == PaymentStatus.PAID
        assert repaid.paid_at == LATER

    def test_remove_unknown_payment(self):
        """Test removing an unknown payment raises EntityNotFoundError."""
        with pytest.raises(EntityNotFoundError, match="Payment with id nope not found"):
            self.service.remove_payment(self.project, "nope", [], NOW)

    def test_manual_status_bypasses_rule(self):
        """Test a manual PAID is kept even without payments."""
        updated = self.service.set_manual_status(self.project, PaymentStatus.PAID, NOW)

        assert updated.payment_status == PaymentStatus.PAID
        assert updated.paid_at == NOW
        assert updated.payments == ()
