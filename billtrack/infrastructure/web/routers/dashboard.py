"""
Dashboard router.
Serves income totals and the per-client chart.
"""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query

from billtrack.application.dto.workspace_dto import DashboardRequestDTO, DashboardResponseDTO
from billtrack.application.use_cases.base_use_case import Clock
from billtrack.application.use_cases.dashboard_use_cases import GetDashboardUseCase
from billtrack.domain.repositories.workspace_repository import WorkspaceRepository
from billtrack.infrastructure.web.dependencies import get_clock, get_workspace_repository


router = APIRouter()


@router.get("", response_model=DashboardResponseDTO)
async def get_dashboard(
    owner_id: str,
    repository: Annotated[WorkspaceRepository, Depends(get_workspace_repository)],
    clock: Annotated[Clock, Depends(get_clock)],
    year: Optional[int] = Query(None, ge=1900, le=9999, description="Year filter"),
    month: Optional[int] = Query(None, ge=1, le=12, description="Month filter")
):
    """
    Get collected, future and potential income.

    - **year**: only payments of this year count as collected
    - **month**: only payments of this month count as collected
    """
    use_case = GetDashboardUseCase(repository, clock).for_owner(owner_id)
    result = await use_case.execute(DashboardRequestDTO(year=year, month=month))
    return result.unwrap()
