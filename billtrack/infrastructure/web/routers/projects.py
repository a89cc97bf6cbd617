"""
Project router.
Handles project creation, edits, status and priority changes, duplication, deletion and payments.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from billtrack.application.dto.workspace_dto import (
    AddPaymentRequestDTO,
    CreateProjectRequestDTO,
    DeletePaymentRequestDTO,
    PaymentBodyDTO,
    PaymentStatusBodyDTO,
    PriorityBodyDTO,
    ProjectRequestDTO,
    ProjectResponseDTO,
    SetPaymentStatusRequestDTO,
    SetPriorityRequestDTO,
    SetWorkStatusRequestDTO,
    UpdateProjectBodyDTO,
    UpdateProjectRequestDTO,
    WorkStatusBodyDTO
)
from billtrack.application.use_cases.base_use_case import Clock
from billtrack.application.use_cases.project_use_cases import (
    AddPaymentUseCase,
    CreateProjectUseCase,
    DeletePaymentUseCase,
    DeleteProjectUseCase,
    DuplicateProjectUseCase,
    SetPaymentStatusUseCase,
    SetPriorityUseCase,
    SetWorkStatusUseCase,
    UpdateProjectUseCase
)
from billtrack.domain.repositories.workspace_repository import WorkspaceRepository
from billtrack.infrastructure.web.dependencies import get_clock, get_workspace_repository


router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ProjectResponseDTO)
async def create_project(
    owner_id: str,
    request: CreateProjectRequestDTO,
    repository: Annotated[WorkspaceRepository, Depends(get_workspace_repository)],
    clock: Annotated[Clock, Depends(get_clock)]
):
    """
    Create a new project at quote stage.

    - **client_id**: Owning client (required)
    - **name**: Project name (required)
    - **value**: Base value, defaults to 0
    - **priority**: low, medium or high, defaults to medium
    """
    use_case = CreateProjectUseCase(repository, clock).for_owner(owner_id)
    result = await use_case.execute(request)
    return result.unwrap()


@router.patch("/{project_id}", response_model=ProjectResponseDTO)
async def update_project(
    owner_id: str,
    project_id: str,
    body: UpdateProjectBodyDTO,
    repository: Annotated[WorkspaceRepository, Depends(get_workspace_repository)],
    clock: Annotated[Clock, Depends(get_clock)]
):
    """
    Edit project details. Omitted fields keep their current value.

    - **name**: Project name
    - **value**: Base value
    - **notes**: Project notes
    """
    use_case = UpdateProjectUseCase(repository, clock).for_owner(owner_id)
    result = await use_case.execute(
        UpdateProjectRequestDTO(project_id=project_id, **body.model_dump())
    )
    return result.unwrap()


@router.put("/{project_id}/work-status", response_model=ProjectResponseDTO)
async def set_work_status(
    owner_id: str,
    project_id: str,
    body: WorkStatusBodyDTO,
    repository: Annotated[WorkspaceRepository, Depends(get_workspace_repository)],
    clock: Annotated[Clock, Depends(get_clock)]
):
    """Move the project along its delivery lifecycle."""
    use_case = SetWorkStatusUseCase(repository, clock).for_owner(owner_id)
    result = await use_case.execute(
        SetWorkStatusRequestDTO(project_id=project_id, work_status=body.work_status)
    )
    return result.unwrap()


@router.put("/{project_id}/priority", response_model=ProjectResponseDTO)
async def set_priority(
    owner_id: str,
    project_id: str,
    body: PriorityBodyDTO,
    repository: Annotated[WorkspaceRepository, Depends(get_workspace_repository)],
    clock: Annotated[Clock, Depends(get_clock)]
):
    """Change the project priority; the client ranking follows."""
    use_case = SetPriorityUseCase(repository, clock).for_owner(owner_id)
    result = await use_case.execute(
        SetPriorityRequestDTO(project_id=project_id, priority=body.priority)
    )
    return result.unwrap()


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(
    owner_id: str,
    project_id: str,
    repository: Annotated[WorkspaceRepository, Depends(get_workspace_repository)],
    clock: Annotated[Clock, Depends(get_clock)]
):
    """Delete a project together with its todos."""
    use_case = DeleteProjectUseCase(repository, clock).for_owner(owner_id)
    result = await use_case.execute(ProjectRequestDTO(project_id=project_id))
    result.unwrap()


@router.post("/{project_id}/duplicate", status_code=status.HTTP_201_CREATED, response_model=ProjectResponseDTO)
async def duplicate_project(
    owner_id: str,
    project_id: str,
    repository: Annotated[WorkspaceRepository, Depends(get_workspace_repository)],
    clock: Annotated[Clock, Depends(get_clock)]
):
    """Copy a project and its todos as a new quote."""
    use_case = DuplicateProjectUseCase(repository, clock).for_owner(owner_id)
    result = await use_case.execute(ProjectRequestDTO(project_id=project_id))
    return result.unwrap()


@router.post("/{project_id}/payments", status_code=status.HTTP_201_CREATED, response_model=ProjectResponseDTO)
async def add_payment(
    owner_id: str,
    project_id: str,
    body: PaymentBodyDTO,
    repository: Annotated[WorkspaceRepository, Depends(get_workspace_repository)],
    clock: Annotated[Clock, Depends(get_clock)]
):
    """
    Record a payment; the project's payment status is updated accordingly.
    """
    use_case = AddPaymentUseCase(repository, clock).for_owner(owner_id)
    result = await use_case.execute(
        AddPaymentRequestDTO(project_id=project_id, **body.model_dump())
    )
    return result.unwrap()


@router.delete("/{project_id}/payments/{payment_id}", response_model=ProjectResponseDTO)
async def delete_payment(
    owner_id: str,
    project_id: str,
    payment_id: str,
    repository: Annotated[WorkspaceRepository, Depends(get_workspace_repository)],
    clock: Annotated[Clock, Depends(get_clock)]
):
    """
    Remove a payment; the project's payment status is updated accordingly.
    """
    use_case = DeletePaymentUseCase(repository, clock).for_owner(owner_id)
    result = await use_case.execute(
        DeletePaymentRequestDTO(project_id=project_id, payment_id=payment_id)
    )
    return result.unwrap()


@router.put("/{project_id}/payment-status", response_model=ProjectResponseDTO)
async def set_payment_status(
    owner_id: str,
    project_id: str,
    body: PaymentStatusBodyDTO,
    repository: Annotated[WorkspaceRepository, Depends(get_workspace_repository)],
    clock: Annotated[Clock, Depends(get_clock)]
):
    """Set the payment status by hand."""
    use_case = SetPaymentStatusUseCase(repository, clock).for_owner(owner_id)
    result = await use_case.execute(
        SetPaymentStatusRequestDTO(project_id=project_id, payment_status=body.payment_status)
    )
    return result.unwrap()
