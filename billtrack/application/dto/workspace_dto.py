"""
Workspace DTOs for request/response data transfer.
"""

import datetime as dt
from typing import List, Optional

from pydantic import Field

from billtrack.application.dto.base_dto import RequestDTO, ResponseDTO
from billtrack.domain.models.client import Client
from billtrack.domain.models.project import Payment, PaymentStatus, Project, ProjectPriority, WorkStatus
from billtrack.domain.models.todo import Todo
from billtrack.domain.models.value_objects import DateFilter
from billtrack.domain.services.aggregation_service import ClientIncome, IncomeTotals


# Request DTOs

class DashboardRequestDTO(RequestDTO):
    """DTO for dashboard figures under a year/month filter."""

    year: Optional[int] = Field(None, ge=1900, le=9999, description="Year filter, all years when omitted")
    month: Optional[int] = Field(None, ge=1, le=12, description="Month filter, all months when omitted")

    def to_filter(self) -> DateFilter:
        return DateFilter(year=self.year, month=self.month)


class TaskBoardRequestDTO(RequestDTO):
    """DTO for the task board."""

    today: Optional[dt.date] = Field(None, description="Reference day, current day when omitted")


class ListClientsRequestDTO(RequestDTO):
    """DTO for the sorted client list."""
    pass


class CreateClientRequestDTO(RequestDTO):
    """DTO for creating a new client."""

    name: str = Field(..., min_length=1, max_length=255, description="Client name")
    email: Optional[str] = Field(None, max_length=255, description="Client email")


class DeleteClientRequestDTO(RequestDTO):
    """DTO for deleting a client and everything it owns."""

    client_id: str = Field(..., min_length=1)


class MoveClientRequestDTO(RequestDTO):
    """DTO for dragging a client onto another client of the same tier."""

    dragged_id: str = Field(..., min_length=1, description="Client being moved")
    target_id: str = Field(..., min_length=1, description="Client whose position it takes")


class CreateProjectRequestDTO(RequestDTO):
    """DTO for creating a new project."""

    client_id: str = Field(..., min_length=1, description="Owning client")
    name: str = Field(..., min_length=1, max_length=255, description="Project name")
    value: float = Field(0.0, ge=0, description="Base project value")
    notes: Optional[str] = Field(None, description="Project notes")
    priority: Optional[ProjectPriority] = Field(None, description="Project priority, medium when omitted")


class ProjectRequestDTO(RequestDTO):
    """DTO addressing a single project."""

    project_id: str = Field(..., min_length=1)


class UpdateProjectBodyDTO(RequestDTO):
    """Request body for editing project details; omitted fields are kept."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    value: Optional[float] = Field(None, ge=0)
    notes: Optional[str] = None


class UpdateProjectRequestDTO(UpdateProjectBodyDTO):
    """DTO for editing project details."""

    project_id: str = Field(..., min_length=1)


class WorkStatusBodyDTO(RequestDTO):
    """Request body for a work status change."""

    work_status: WorkStatus


class SetWorkStatusRequestDTO(WorkStatusBodyDTO):
    """DTO for a work status change on a project."""

    project_id: str = Field(..., min_length=1)


class PriorityBodyDTO(RequestDTO):
    """Request body for a priority change."""

    priority: ProjectPriority


class SetPriorityRequestDTO(PriorityBodyDTO):
    """DTO for a priority change on a project."""

    project_id: str = Field(..., min_length=1)


class PaymentBodyDTO(RequestDTO):
    """Request body for recording a payment."""

    amount: float = Field(..., gt=0, description="Amount collected")
    date: dt.date
    notes: Optional[str] = Field(None, description="Payment notes")


class AddPaymentRequestDTO(PaymentBodyDTO):
    """DTO for recording a payment on a project."""

    project_id: str = Field(..., min_length=1)


class DeletePaymentRequestDTO(RequestDTO):
    """DTO for removing a payment from a project."""

    project_id: str = Field(..., min_length=1)
    payment_id: str = Field(..., min_length=1)


class PaymentStatusBodyDTO(RequestDTO):
    """Request body for a manual payment status change."""

    payment_status: PaymentStatus


class SetPaymentStatusRequestDTO(PaymentStatusBodyDTO):
    """DTO for a manual payment status change on a project."""

    project_id: str = Field(..., min_length=1)


class CreateTodoRequestDTO(RequestDTO):
    """DTO for creating a new todo."""

    project_id: str = Field(..., min_length=1, description="Owning project")
    task: str = Field(..., min_length=1, max_length=500, description="Task label")
    income: float = Field(0.0, ge=0, description="Extra income contributed to the project total")
    due_date: Optional[dt.date] = Field(None, description="Due date")


class TodoRequestDTO(RequestDTO):
    """DTO addressing a single todo."""

    todo_id: str = Field(..., min_length=1)


class TodoCompletedBodyDTO(RequestDTO):
    """Request body for checking or unchecking a todo."""

    completed: bool


class ToggleTodoRequestDTO(TodoCompletedBodyDTO):
    """DTO for checking or unchecking a todo."""

    todo_id: str = Field(..., min_length=1)


class ReorderTodosRequestDTO(RequestDTO):
    """DTO for a manual reorder of todos."""

    todo_ids: List[str] = Field(..., min_length=1, description="Todo ids in their new order")
    base_order: Optional[int] = Field(None, description="First order value, current timestamp when omitted")


# Response DTOs

class IncomeTotalsDTO(ResponseDTO):
    """Collected, future and potential income."""

    collected: float
    future: float
    potential: float

    @classmethod
    def from_domain(cls, totals: IncomeTotals) -> "IncomeTotalsDTO":
        return cls(collected=totals.collected, future=totals.future, potential=totals.potential)


class ClientIncomeDTO(IncomeTotalsDTO):
    """Chart row for one client."""

    client_id: str
    name: str

    @classmethod
    def from_domain(cls, row: ClientIncome) -> "ClientIncomeDTO":
        return cls(
            client_id=row.client_id,
            name=row.name,
            collected=row.totals.collected,
            future=row.totals.future,
            potential=row.totals.potential,
        )


class DashboardResponseDTO(ResponseDTO):
    """Dashboard figures."""

    year: Optional[int] = None
    month: Optional[int] = None
    totals: IncomeTotalsDTO
    chart: List[ClientIncomeDTO]
    available_years: List[int]


class ClientResponseDTO(ResponseDTO):
    """Client with its derived sidebar state."""

    id: str
    name: str
    email: Optional[str] = None
    priority: Optional[ProjectPriority] = None
    inactive: bool = False

    @classmethod
    def from_domain(
        cls,
        client: Client,
        priority: Optional[ProjectPriority] = None,
        inactive: bool = False
    ) -> "ClientResponseDTO":
        return cls(
            id=client.id,
            name=client.name,
            email=client.email,
            priority=priority,
            inactive=inactive,
        )


class PaymentResponseDTO(ResponseDTO):
    """Recorded payment."""

    id: str
    amount: float
    date: Optional[dt.date] = None
    notes: Optional[str] = None

    @classmethod
    def from_domain(cls, payment: Payment) -> "PaymentResponseDTO":
        return cls(id=payment.id, amount=payment.amount, date=payment.date, notes=payment.notes)


class ProjectResponseDTO(ResponseDTO):
    """Project with its derived balances."""

    id: str
    client_id: str
    name: str
    value: float
    work_status: str
    payment_status: str
    priority: str
    created_at: Optional[dt.datetime] = None
    notes: Optional[str] = None
    paid_at: Optional[dt.datetime] = None
    payments: List[PaymentResponseDTO] = Field(default_factory=list)
    total: float
    paid_amount: float
    remaining: float

    @classmethod
    def from_domain(
        cls,
        project: Project,
        total: float,
        paid_amount: float
    ) -> "ProjectResponseDTO":
        return cls(
            id=project.id,
            client_id=project.client_id,
            name=project.name,
            value=project.value,
            work_status=project.work_status.value,
            payment_status=project.payment_status.value,
            priority=project.priority.value,
            created_at=project.created_at,
            notes=project.notes,
            paid_at=project.paid_at,
            payments=[PaymentResponseDTO.from_domain(p) for p in project.payments],
            total=total,
            paid_amount=paid_amount,
            remaining=total - paid_amount,
        )


class TodoResponseDTO(ResponseDTO):
    """Todo with its client/project label."""

    id: str
    project_id: str
    task: str
    income: float
    completed: bool
    due_date: Optional[dt.date] = None
    order: Optional[int] = None
    context: str = ""

    @classmethod
    def from_domain(cls, todo: Todo, context: str = "") -> "TodoResponseDTO":
        return cls(
            id=todo.id,
            project_id=todo.project_id,
            task=todo.task,
            income=todo.income,
            completed=todo.completed,
            due_date=todo.due_date,
            order=todo.order,
            context=context,
        )


class TaskBoardResponseDTO(ResponseDTO):
    """Open todos grouped by due date."""

    today: dt.date
    overdue: List[TodoResponseDTO]
    due_today: List[TodoResponseDTO]
    upcoming: List[TodoResponseDTO]
    no_date: List[TodoResponseDTO]
