"""
Task use cases for the application layer.
"""

from datetime import datetime
from typing import Optional

from billtrack.application.dto.workspace_dto import (
    CreateTodoRequestDTO,
    ReorderTodosRequestDTO,
    TaskBoardRequestDTO,
    TaskBoardResponseDTO,
    TodoRequestDTO,
    TodoResponseDTO,
    ToggleTodoRequestDTO
)
from billtrack.application.use_cases.base_use_case import Clock, CommandUseCase, QueryUseCase
from billtrack.domain.models.todo import Todo
from billtrack.domain.models.workspace import Workspace
from billtrack.domain.repositories.workspace_repository import WorkspaceRepository
from billtrack.domain.services.task_board_service import TaskBoardService
from billtrack.domain.services.workspace_service import WorkspaceService


class GetTaskBoardUseCase(QueryUseCase[TaskBoardRequestDTO, TaskBoardResponseDTO]):
    """Use case grouping open todos into overdue, today, upcoming and undated."""

    def __init__(
        self,
        repository: WorkspaceRepository,
        clock: Optional[Clock] = None,
        task_board_service: Optional[TaskBoardService] = None
    ):
        super().__init__(repository, clock)
        self.task_board_service = task_board_service or TaskBoardService()

    async def _execute_query(self, request: TaskBoardRequestDTO, workspace: Workspace) -> TaskBoardResponseDTO:
        today = request.today or self.clock().date()
        board = self.task_board_service.build_board(workspace, today)

        def to_dto(todo: Todo) -> TodoResponseDTO:
            return TodoResponseDTO.from_domain(todo, self.task_board_service.task_context(todo, workspace))

        return TaskBoardResponseDTO(
            today=today,
            overdue=[to_dto(t) for t in board.overdue],
            due_today=[to_dto(t) for t in board.today],
            upcoming=[to_dto(t) for t in board.upcoming],
            no_date=[to_dto(t) for t in board.no_date],
        )


class TaskCommandUseCase(CommandUseCase):
    """Shared wiring for todo commands."""

    def __init__(
        self,
        repository: WorkspaceRepository,
        clock: Optional[Clock] = None,
        workspace_service: Optional[WorkspaceService] = None
    ):
        super().__init__(repository, clock)
        self.workspace_service = workspace_service or WorkspaceService()


class AddTodoUseCase(TaskCommandUseCase):
    """Use case for creating a new todo."""

    async def _execute_command_logic(self, request: CreateTodoRequestDTO, workspace: Workspace, now: datetime):
        updated, todo = self.workspace_service.add_todo(
            workspace,
            project_id=request.project_id,
            task=request.task,
            income=request.income,
            due_date=request.due_date,
        )
        return updated, TodoResponseDTO.from_domain(todo)


class ToggleTodoUseCase(TaskCommandUseCase):
    """Use case checking or unchecking a todo."""

    async def _execute_command_logic(self, request: ToggleTodoRequestDTO, workspace: Workspace, now: datetime):
        updated = self.workspace_service.toggle_todo(workspace, request.todo_id, request.completed)
        return updated, TodoResponseDTO.from_domain(updated.get_todo(request.todo_id))


class DeleteTodoUseCase(TaskCommandUseCase):
    """Use case deleting a todo."""

    async def _execute_command_logic(self, request: TodoRequestDTO, workspace: Workspace, now: datetime):
        return self.workspace_service.delete_todo(workspace, request.todo_id), True


class ReorderTodosUseCase(TaskCommandUseCase):
    """Use case storing a manual todo order."""

    async def _execute_command_logic(self, request: ReorderTodosRequestDTO, workspace: Workspace, now: datetime):
        base_order = request.base_order
        if base_order is None:
            base_order = int(now.timestamp() * 1000)
        updated = self.workspace_service.reorder_todos(workspace, request.todo_ids, base_order)
        return updated, [
            TodoResponseDTO.from_domain(updated.get_todo(todo_id)) for todo_id in request.todo_ids
        ]
