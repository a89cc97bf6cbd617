"""Aggregation service for dashboard and chart revenue figures.

Three buckets are produced:

- collected: payments whose date falls within the active filter, across
  every project including cancelled ones;
- future: outstanding balance of projects in progress or delivered;
- potential: full total of projects still at quote stage.

Future and potential ignore the date filter.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from billtrack.domain.models.project import Project, WorkStatus
from billtrack.domain.models.value_objects import DateFilter
from billtrack.domain.models.workspace import Workspace
from billtrack.domain.services.financial_service import FinancialService


_BILLABLE_WORK = (WorkStatus.IN_PROGRESS, WorkStatus.DELIVERED)


@dataclass(frozen=True)
class IncomeTotals:
    """Collected, future and potential income."""

    collected: float = 0.0
    future: float = 0.0
    potential: float = 0.0

    def __add__(self, other: "IncomeTotals") -> "IncomeTotals":
        return IncomeTotals(
            collected=self.collected + other.collected,
            future=self.future + other.future,
            potential=self.potential + other.potential,
        )

    @property
    def has_activity(self) -> bool:
        return self.collected > 0 or self.future > 0 or self.potential > 0


@dataclass(frozen=True)
class ClientIncome:
    """Income breakdown of one client for charting."""

    client_id: str
    name: str
    totals: IncomeTotals


class AggregationService:
    """
    Domain service folding projects into income buckets.
    """

    def __init__(self, financial_service: Optional[FinancialService] = None):
        self.financial_service = financial_service or FinancialService()

    def collected_amount(self, project: Project, date_filter: DateFilter) -> float:
        """Sum of the project's payments dated within the filter."""
        return sum(
            (payment.amount for payment in project.payments or () if date_filter.matches(payment.date)),
            0
        )

    def pipeline_amounts(self, project: Project, total: float) -> Tuple[float, float]:
        """
        Return the (future, potential) contribution of one project.

        Cancelled and paid projects contribute nothing. Projects in progress
        or delivered contribute their positive remaining balance; anything
        else is still a quote and contributes its full total.
        """
        if project.is_cancelled or project.is_paid:
            return 0.0, 0.0

        if project.work_status in _BILLABLE_WORK:
            remaining = total - self.financial_service.paid_amount(project)
            return (remaining if remaining > 0 else 0.0), 0.0

        return 0.0, total

    def project_income(
        self,
        project: Project,
        total: float,
        date_filter: DateFilter
    ) -> IncomeTotals:
        future, potential = self.pipeline_amounts(project, total)
        return IncomeTotals(
            collected=self.collected_amount(project, date_filter),
            future=future,
            potential=potential,
        )

    def dashboard_totals(
        self,
        workspace: Workspace,
        date_filter: Optional[DateFilter] = None
    ) -> IncomeTotals:
        """Totals across every project in the workspace."""
        date_filter = date_filter or DateFilter.all()
        totals = self.financial_service.project_totals(workspace.projects, workspace.todos)

        result = IncomeTotals()
        for project in workspace.projects:
            result += self.project_income(project, totals[project.id], date_filter)
        return result

    def client_breakdown(
        self,
        workspace: Workspace,
        date_filter: Optional[DateFilter] = None
    ) -> List[ClientIncome]:
        """
        Per-client totals in client order.
        Clients without any income are omitted; projects whose client is
        missing are ignored.
        """
        date_filter = date_filter or DateFilter.all()
        totals = self.financial_service.project_totals(workspace.projects, workspace.todos)

        by_client: Dict[str, IncomeTotals] = {client.id: IncomeTotals() for client in workspace.clients}
        for project in workspace.projects:
            if project.client_id not in by_client:
                continue
            by_client[project.client_id] += self.project_income(
                project, totals[project.id], date_filter
            )

        return [
            ClientIncome(client_id=client.id, name=client.name, totals=by_client[client.id])
            for client in workspace.clients
            if by_client[client.id].has_activity
        ]

    def available_years(self, projects: Iterable[Project]) -> List[int]:
        """Distinct years of project creation and payment dates, newest first."""
        years = set()
        for project in projects:
            if project.created_at:
                years.add(project.created_at.year)
            for payment in project.payments or ():
                if payment.date:
                    years.add(payment.date.year)
        return sorted(years, reverse=True)
