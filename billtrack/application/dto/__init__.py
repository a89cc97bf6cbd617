"""
Data transfer objects for the application layer.
"""

from .base_dto import BaseDTO, RequestDTO, ResponseDTO
from .workspace_dto import (
    # Requests
    DashboardRequestDTO,
    TaskBoardRequestDTO,
    ListClientsRequestDTO,
    CreateClientRequestDTO,
    DeleteClientRequestDTO,
    MoveClientRequestDTO,
    CreateProjectRequestDTO,
    ProjectRequestDTO,
    UpdateProjectBodyDTO,
    UpdateProjectRequestDTO,
    WorkStatusBodyDTO,
    SetWorkStatusRequestDTO,
    PriorityBodyDTO,
    SetPriorityRequestDTO,
    PaymentBodyDTO,
    AddPaymentRequestDTO,
    DeletePaymentRequestDTO,
    PaymentStatusBodyDTO,
    SetPaymentStatusRequestDTO,
    CreateTodoRequestDTO,
    TodoRequestDTO,
    TodoCompletedBodyDTO,
    ToggleTodoRequestDTO,
    ReorderTodosRequestDTO,

    # Responses
    IncomeTotalsDTO,
    ClientIncomeDTO,
    DashboardResponseDTO,
    ClientResponseDTO,
    PaymentResponseDTO,
    ProjectResponseDTO,
    TodoResponseDTO,
    TaskBoardResponseDTO
)
