"""
Project use cases for the application layer.
Implements project lifecycle and payment operations.
"""

import logging
from datetime import datetime
from typing import Optional

from billtrack.application.dto.workspace_dto import (
    AddPaymentRequestDTO,
    CreateProjectRequestDTO,
    DeletePaymentRequestDTO,
    ProjectRequestDTO,
    ProjectResponseDTO,
    SetPaymentStatusRequestDTO,
    SetPriorityRequestDTO,
    SetWorkStatusRequestDTO,
    UpdateProjectRequestDTO
)
from billtrack.application.use_cases.base_use_case import Clock, CommandUseCase
from billtrack.domain.models.project import PaymentStatus, Project, ProjectPriority, WorkStatus
from billtrack.domain.models.workspace import Workspace
from billtrack.domain.repositories.workspace_repository import WorkspaceRepository
from billtrack.domain.services.financial_service import FinancialService
from billtrack.domain.services.workspace_service import WorkspaceService

logger = logging.getLogger(__name__)


class ProjectCommandUseCase(CommandUseCase):
    """Shared wiring for commands returning a project."""

    def __init__(
        self,
        repository: WorkspaceRepository,
        clock: Optional[Clock] = None,
        workspace_service: Optional[WorkspaceService] = None,
        financial_service: Optional[FinancialService] = None
    ):
        super().__init__(repository, clock)
        self.workspace_service = workspace_service or WorkspaceService()
        self.financial_service = financial_service or FinancialService()

    def _project_to_response_dto(self, project: Project, workspace: Workspace) -> ProjectResponseDTO:
        return ProjectResponseDTO.from_domain(
            project,
            total=self.financial_service.project_total(project, workspace.todos),
            paid_amount=self.financial_service.paid_amount(project),
        )


class CreateProjectUseCase(ProjectCommandUseCase):
    """Use case for creating a new project."""

    async def _execute_command_logic(self, request: CreateProjectRequestDTO, workspace: Workspace, now: datetime):
        updated, project = self.workspace_service.add_project(
            workspace,
            client_id=request.client_id,
            name=request.name,
            value=request.value,
            now=now,
            notes=request.notes,
            priority=ProjectPriority(request.priority) if request.priority else ProjectPriority.MEDIUM,
        )
        return updated, self._project_to_response_dto(project, updated)


class UpdateProjectUseCase(ProjectCommandUseCase):
    """Use case editing name, value or notes of a project."""

    async def _execute_command_logic(self, request: UpdateProjectRequestDTO, workspace: Workspace, now: datetime):
        updated = self.workspace_service.update_project(
            workspace,
            request.project_id,
            name=request.name,
            value=request.value,
            notes=request.notes,
        )
        return updated, self._project_to_response_dto(updated.get_project(request.project_id), updated)


class SetWorkStatusUseCase(ProjectCommandUseCase):
    """Use case moving a project along its delivery lifecycle."""

    async def _execute_command_logic(self, request: SetWorkStatusRequestDTO, workspace: Workspace, now: datetime):
        updated = self.workspace_service.set_work_status(
            workspace, request.project_id, WorkStatus(request.work_status)
        )
        logger.info(f"Project {request.project_id} work status set to {request.work_status}")
        return updated, self._project_to_response_dto(updated.get_project(request.project_id), updated)


class SetPriorityUseCase(ProjectCommandUseCase):
    """Use case changing a project priority."""

    async def _execute_command_logic(self, request: SetPriorityRequestDTO, workspace: Workspace, now: datetime):
        updated = self.workspace_service.set_priority(
            workspace, request.project_id, ProjectPriority(request.priority)
        )
        return updated, self._project_to_response_dto(updated.get_project(request.project_id), updated)


class DeleteProjectUseCase(ProjectCommandUseCase):
    """Use case deleting a project with its todos."""

    async def _execute_command_logic(self, request: ProjectRequestDTO, workspace: Workspace, now: datetime):
        return self.workspace_service.delete_project(workspace, request.project_id), True


class DuplicateProjectUseCase(ProjectCommandUseCase):
    """Use case copying a project and its todos as a new quote."""

    async def _execute_command_logic(self, request: ProjectRequestDTO, workspace: Workspace, now: datetime):
        updated, copy = self.workspace_service.duplicate_project(workspace, request.project_id, now)
        return updated, self._project_to_response_dto(copy, updated)


class AddPaymentUseCase(ProjectCommandUseCase):
    """Use case recording a payment and refreshing the payment status."""

    async def _execute_command_logic(self, request: AddPaymentRequestDTO, workspace: Workspace, now: datetime):
        updated, payment = self.workspace_service.add_payment(
            workspace,
            project_id=request.project_id,
            amount=request.amount,
            payment_date=request.date,
            now=now,
            notes=request.notes,
        )
        project = updated.get_project(request.project_id)
        logger.info(
            f"Payment {payment.id} of {payment.amount} added to project {project.id}, "
            f"status {project.payment_status.value}"
        )
        return updated, self._project_to_response_dto(project, updated)


class DeletePaymentUseCase(ProjectCommandUseCase):
    """Use case removing a payment and refreshing the payment status."""

    async def _execute_command_logic(self, request: DeletePaymentRequestDTO, workspace: Workspace, now: datetime):
        updated = self.workspace_service.delete_payment(
            workspace, request.project_id, request.payment_id, now
        )
        project = updated.get_project(request.project_id)
        logger.info(
            f"Payment {request.payment_id} removed from project {project.id}, "
            f"status {project.payment_status.value}"
        )
        return updated, self._project_to_response_dto(project, updated)


class SetPaymentStatusUseCase(ProjectCommandUseCase):
    """Use case for a manual payment status change."""

    async def _execute_command_logic(self, request: SetPaymentStatusRequestDTO, workspace: Workspace, now: datetime):
        updated = self.workspace_service.set_payment_status(
            workspace, request.project_id, PaymentStatus(request.payment_status), now
        )
        return updated, self._project_to_response_dto(updated.get_project(request.project_id), updated)
