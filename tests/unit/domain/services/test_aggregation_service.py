"""
Unit tests for AggregationService domain service.
"""

from datetime import date, datetime

from billtrack.domain.models.client import Client
from billtrack.domain.models.project import Payment, PaymentStatus, Project, WorkStatus
from billtrack.domain.models.todo import Todo
from billtrack.domain.models.value_objects import DateFilter
from billtrack.domain.models.workspace import Workspace
from billtrack.domain.services.aggregation_service import AggregationService, IncomeTotals


class TestAggregationService:
    """Test cases for AggregationService domain service."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = AggregationService()
        self.clients = [
            Client(id="c1", name="Acme"),
            Client(id="c2", name="Globex"),
            Client(id="c3", name="Idle"),
        ]
        self.in_progress = Project(
            id="p1",
            client_id="c1",
            value=1000.0,
            work_status=WorkStatus.IN_PROGRESS,
            payment_status=PaymentStatus.PARTIALLY_PAID,
            created_at=datetime(2023, 11, 2),
            payments=(Payment(id="pay1", amount=400.0, date=date(2024, 1, 15)),),
        )
        self.quote = Project(
            id="p2",
            client_id="c2",
            value=2000.0,
            work_status=WorkStatus.QUOTE_SENT,
            created_at=datetime(2024, 2, 1),
        )
        self.cancelled = Project(
            id="p3",
            client_id="c2",
            value=800.0,
            work_status=WorkStatus.CANCELLED,
            payment_status=PaymentStatus.PARTIALLY_PAID,
            created_at=datetime(2024, 2, 5),
            payments=(Payment(id="pay2", amount=100.0, date=date(2024, 2, 20)),),
        )
        self.todos = [
            Todo(id="t1", project_id="p1", income=200.0),
            Todo(id="t2", project_id="p2", income=300.0),
        ]
        self.workspace = Workspace.of(
            clients=self.clients,
            projects=[self.in_progress, self.quote, self.cancelled],
            todos=self.todos,
        )

    def test_dashboard_totals_unfiltered(self):
        """Test collected includes cancelled payments; future and potential do not."""
        totals = self.service.dashboard_totals(self.workspace)

        assert totals == IncomeTotals(collected=500.0, future=800.0, potential=2300.0)

    def test_dashboard_totals_filtered_by_month(self):
        """Test only collected is affected by the date filter."""
        totals = self.service.dashboard_totals(self.workspace, DateFilter(year=2024, month=2))

        assert totals.collected == 100.0
        assert totals.future == 800.0
        assert totals.potential == 2300.0

    def test_filter_with_no_matching_payments(self):
        """Test an empty period collects nothing."""
        totals = self.service.dashboard_totals(self.workspace, DateFilter(year=2020))

        assert totals.collected == 0
        assert totals.future == 800.0

    def test_paid_project_contributes_only_collected(self):
        """Test a paid project has no future or potential income."""
        paid = Project(
            id="p9",
            value=500.0,
            work_status=WorkStatus.DELIVERED,
            payment_status=PaymentStatus.PAID,
            payments=(Payment(id="pay9", amount=500.0, date=date(2024, 3, 1)),),
        )

        income = self.service.project_income(paid, 500.0, DateFilter.all())

        assert income == IncomeTotals(collected=500.0, future=0.0, potential=0.0)

    def test_overpaid_project_has_no_negative_future(self):
        """Test future income is clamped at zero."""
        overpaid = Project(
            id="p9",
            value=100.0,
            work_status=WorkStatus.DELIVERED,
            payment_status=PaymentStatus.INVOICED,
            payments=(Payment(id="pay9", amount=150.0, date=date(2024, 3, 1)),),
        )

        assert self.service.pipeline_amounts(overpaid, 100.0) == (0.0, 0.0)

    def test_quote_with_partial_payment_counts_full_total_as_potential(self):
        """Test quote-stage projects contribute their full total."""
        quote = Project(
            id="p9",
            value=1000.0,
            work_status=WorkStatus.QUOTE_TO_SEND,
            payments=(Payment(id="pay9", amount=200.0, date=date(2024, 3, 1)),),
        )

        assert self.service.pipeline_amounts(quote, 1000.0) == (0.0, 1000.0)

    def test_client_breakdown(self):
        """Test chart rows keep client order and skip clients without income."""
        rows = self.service.client_breakdown(self.workspace)

        assert [row.client_id for row in rows] == ["c1", "c2"]
        assert rows[0].name == "Acme"
        assert rows[0].totals == IncomeTotals(collected=400.0, future=800.0, potential=0.0)
        assert rows[1].totals == IncomeTotals(collected=100.0, future=0.0, potential=2300.0)

    def test_client_breakdown_ignores_orphan_projects(self):
        """Test projects of a missing client are left out of the chart."""
        orphan = Project(id="p9", client_id="gone", value=5000.0)
        workspace = self.workspace.with_changes(projects=self.workspace.projects + (orphan,))

        rows = self.service.client_breakdown(workspace)

        assert "gone" not in [row.client_id for row in rows]
        assert sum(row.totals.potential for row in rows) == 2300.0

    def test_client_breakdown_respects_filter(self):
        """Test a client whose only income falls outside the filter is omitted."""
        workspace = Workspace.of(clients=self.clients, projects=[self.cancelled])

        assert self.service.client_breakdown(workspace, DateFilter(year=2024, month=2))[0].client_id == "c2"
        assert self.service.client_breakdown(workspace, DateFilter(year=2023)) == []

    def test_available_years(self):
        """Test distinct creation and payment years, newest first."""
        assert self.service.available_years(self.workspace.projects) == [2024, 2023]

    def test_available_years_empty(self):
        """Test no projects means no years."""
        assert self.service.available_years([]) == []
