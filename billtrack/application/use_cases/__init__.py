"""
Use cases for the application layer.
"""

from .base_use_case import UseCaseResult, system_clock
from .client_use_cases import CreateClientUseCase, DeleteClientUseCase, ListClientsUseCase, MoveClientUseCase
from .dashboard_use_cases import GetDashboardUseCase
from .project_use_cases import (
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
from .task_use_cases import (
    AddTodoUseCase,
    DeleteTodoUseCase,
    GetTaskBoardUseCase,
    ReorderTodosUseCase,
    ToggleTodoUseCase
)

__all__ = [
    "UseCaseResult",
    "system_clock",
    "CreateClientUseCase",
    "DeleteClientUseCase",
    "ListClientsUseCase",
    "MoveClientUseCase",
    "GetDashboardUseCase",
    "AddPaymentUseCase",
    "CreateProjectUseCase",
    "DeletePaymentUseCase",
    "DeleteProjectUseCase",
    "DuplicateProjectUseCase",
    "SetPaymentStatusUseCase",
    "SetPriorityUseCase",
    "SetWorkStatusUseCase",
    "UpdateProjectUseCase",
    "AddTodoUseCase",
    "DeleteTodoUseCase",
    "GetTaskBoardUseCase",
    "ReorderTodosUseCase",
    "ToggleTodoUseCase",
]
