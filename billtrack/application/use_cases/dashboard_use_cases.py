"""
Dashboard use cases for the application layer.
"""

from typing import Optional

from billtrack.application.dto.workspace_dto import (
    ClientIncomeDTO,
    DashboardRequestDTO,
    DashboardResponseDTO,
    IncomeTotalsDTO
)
from billtrack.application.use_cases.base_use_case import Clock, QueryUseCase
from billtrack.domain.models.workspace import Workspace
from billtrack.domain.repositories.workspace_repository import WorkspaceRepository
from billtrack.domain.services.aggregation_service import AggregationService


class GetDashboardUseCase(QueryUseCase[DashboardRequestDTO, DashboardResponseDTO]):
    """Use case computing dashboard totals, chart rows and filter years."""

    def __init__(
        self,
        repository: WorkspaceRepository,
        clock: Optional[Clock] = None,
        aggregation_service: Optional[AggregationService] = None
    ):
        super().__init__(repository, clock)
        self.aggregation_service = aggregation_service or AggregationService()

    async def _execute_query(self, request: DashboardRequestDTO, workspace: Workspace) -> DashboardResponseDTO:
        date_filter = request.to_filter()
        totals = self.aggregation_service.dashboard_totals(workspace, date_filter)
        chart = self.aggregation_service.client_breakdown(workspace, date_filter)

        return DashboardResponseDTO(
            year=request.year,
            month=request.month,
            totals=IncomeTotalsDTO.from_domain(totals),
            chart=[ClientIncomeDTO.from_domain(row) for row in chart],
            available_years=self.aggregation_service.available_years(workspace.projects),
        )
