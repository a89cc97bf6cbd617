"""
Client router.
Handles the sorted client list, creation and cascading deletion.
"""

from typing import Annotated, List

from fastapi import APIRouter, Depends, status

from billtrack.application.dto.workspace_dto import (
    ClientResponseDTO,
    CreateClientRequestDTO,
    DeleteClientRequestDTO,
    ListClientsRequestDTO,
    MoveClientRequestDTO
)
from billtrack.application.use_cases.base_use_case import Clock
from billtrack.application.use_cases.client_use_cases import (
    CreateClientUseCase,
    DeleteClientUseCase,
    ListClientsUseCase,
    MoveClientUseCase
)
from billtrack.domain.repositories.workspace_repository import WorkspaceRepository
from billtrack.infrastructure.web.dependencies import get_clock, get_workspace_repository


router = APIRouter()


@router.get("", response_model=List[ClientResponseDTO])
async def list_clients(
    owner_id: str,
    repository: Annotated[WorkspaceRepository, Depends(get_workspace_repository)],
    clock: Annotated[Clock, Depends(get_clock)]
):
    """
    List clients ordered by effective priority (high, medium, then low or none).
    """
    use_case = ListClientsUseCase(repository, clock).for_owner(owner_id)
    result = await use_case.execute(ListClientsRequestDTO())
    return result.unwrap()


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ClientResponseDTO)
async def create_client(
    owner_id: str,
    request: CreateClientRequestDTO,
    repository: Annotated[WorkspaceRepository, Depends(get_workspace_repository)],
    clock: Annotated[Clock, Depends(get_clock)]
):
    """
    Create a new client.

    - **name**: Client name (required)
    - **email**: Optional contact email
    """
    use_case = CreateClientUseCase(repository, clock).for_owner(owner_id)
    result = await use_case.execute(request)
    return result.unwrap()


@router.put("/order", response_model=List[ClientResponseDTO])
async def move_client(
    owner_id: str,
    request: MoveClientRequestDTO,
    repository: Annotated[WorkspaceRepository, Depends(get_workspace_repository)],
    clock: Annotated[Clock, Depends(get_clock)]
):
    """
    Drop a client onto another one of the same priority tier.
    Drops across tiers leave the order unchanged.
    """
    use_case = MoveClientUseCase(repository, clock).for_owner(owner_id)
    result = await use_case.execute(request)
    return result.unwrap()


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_client(
    owner_id: str,
    client_id: str,
    repository: Annotated[WorkspaceRepository, Depends(get_workspace_repository)],
    clock: Annotated[Clock, Depends(get_clock)]
):
    """
    Delete a client together with its projects and their todos.
    """
    use_case = DeleteClientUseCase(repository, clock).for_owner(owner_id)
    result = await use_case.execute(DeleteClientRequestDTO(client_id=client_id))
    result.unwrap()
