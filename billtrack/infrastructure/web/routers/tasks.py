"""
Task router.
Serves the grouped task board and manual reordering.
"""

from datetime import date
from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, Query, status

from billtrack.application.dto.workspace_dto import (
    CreateTodoRequestDTO,
    ReorderTodosRequestDTO,
    TaskBoardRequestDTO,
    TaskBoardResponseDTO,
    TodoCompletedBodyDTO,
    TodoRequestDTO,
    TodoResponseDTO,
    ToggleTodoRequestDTO
)
from billtrack.application.use_cases.base_use_case import Clock
from billtrack.application.use_cases.task_use_cases import (
    AddTodoUseCase,
    DeleteTodoUseCase,
    GetTaskBoardUseCase,
    ReorderTodosUseCase,
    ToggleTodoUseCase
)
from billtrack.domain.repositories.workspace_repository import WorkspaceRepository
from billtrack.infrastructure.web.dependencies import get_clock, get_workspace_repository


router = APIRouter()


@router.get("", response_model=TaskBoardResponseDTO)
async def get_task_board(
    owner_id: str,
    repository: Annotated[WorkspaceRepository, Depends(get_workspace_repository)],
    clock: Annotated[Clock, Depends(get_clock)],
    today: Optional[date] = Query(None, description="Reference day, defaults to the current day")
):
    """
    Get open todos grouped into overdue, today, upcoming and undated.
    """
    use_case = GetTaskBoardUseCase(repository, clock).for_owner(owner_id)
    result = await use_case.execute(TaskBoardRequestDTO(today=today))
    return result.unwrap()


@router.post("", status_code=status.HTTP_201_CREATED, response_model=TodoResponseDTO)
async def create_todo(
    owner_id: str,
    request: CreateTodoRequestDTO,
    repository: Annotated[WorkspaceRepository, Depends(get_workspace_repository)],
    clock: Annotated[Clock, Depends(get_clock)]
):
    """Create a todo on a project."""
    use_case = AddTodoUseCase(repository, clock).for_owner(owner_id)
    result = await use_case.execute(request)
    return result.unwrap()


@router.put("/order", response_model=List[TodoResponseDTO])
async def reorder_todos(
    owner_id: str,
    request: ReorderTodosRequestDTO,
    repository: Annotated[WorkspaceRepository, Depends(get_workspace_repository)],
    clock: Annotated[Clock, Depends(get_clock)]
):
    """Store a manual order for the given todos."""
    use_case = ReorderTodosUseCase(repository, clock).for_owner(owner_id)
    result = await use_case.execute(request)
    return result.unwrap()


@router.put("/{todo_id}/completed", response_model=TodoResponseDTO)
async def set_todo_completed(
    owner_id: str,
    todo_id: str,
    body: TodoCompletedBodyDTO,
    repository: Annotated[WorkspaceRepository, Depends(get_workspace_repository)],
    clock: Annotated[Clock, Depends(get_clock)]
):
    """Check or uncheck a todo; completed todos leave the board."""
    use_case = ToggleTodoUseCase(repository, clock).for_owner(owner_id)
    result = await use_case.execute(ToggleTodoRequestDTO(todo_id=todo_id, completed=body.completed))
    return result.unwrap()


@router.delete("/{todo_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_todo(
    owner_id: str,
    todo_id: str,
    repository: Annotated[WorkspaceRepository, Depends(get_workspace_repository)],
    clock: Annotated[Clock, Depends(get_clock)]
):
    """Delete a todo."""
    use_case = DeleteTodoUseCase(repository, clock).for_owner(owner_id)
    result = await use_case.execute(TodoRequestDTO(todo_id=todo_id))
    result.unwrap()
