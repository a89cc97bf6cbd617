"""
Client use cases for the application layer.
"""

import logging
from datetime import datetime
from typing import List, Optional

from billtrack.application.dto.workspace_dto import (
    ClientResponseDTO,
    CreateClientRequestDTO,
    DeleteClientRequestDTO,
    ListClientsRequestDTO,
    MoveClientRequestDTO
)
from billtrack.application.use_cases.base_use_case import Clock, CommandUseCase, QueryUseCase
from billtrack.domain.models.workspace import Workspace
from billtrack.domain.repositories.workspace_repository import WorkspaceRepository
from billtrack.domain.services.ranking_service import RankingService
from billtrack.domain.services.workspace_service import WorkspaceService

logger = logging.getLogger(__name__)


def _sorted_client_dtos(ranking_service: RankingService, workspace: Workspace) -> List[ClientResponseDTO]:
    """Clients in sidebar order with their effective priority and inactive flag."""
    priorities = ranking_service.client_priorities(workspace.projects)
    inactive = ranking_service.inactive_client_ids(workspace.clients, workspace.projects)

    return [
        ClientResponseDTO.from_domain(
            client,
            priority=priorities.get(client.id),
            inactive=client.id in inactive,
        )
        for client in ranking_service.sort_clients(workspace.clients, workspace.projects)
    ]


class ListClientsUseCase(QueryUseCase[ListClientsRequestDTO, List[ClientResponseDTO]]):
    """Use case listing clients by effective priority tier."""

    def __init__(
        self,
        repository: WorkspaceRepository,
        clock: Optional[Clock] = None,
        ranking_service: Optional[RankingService] = None
    ):
        super().__init__(repository, clock)
        self.ranking_service = ranking_service or RankingService()

    async def _execute_query(self, request: ListClientsRequestDTO, workspace: Workspace) -> List[ClientResponseDTO]:
        return _sorted_client_dtos(self.ranking_service, workspace)


class CreateClientUseCase(CommandUseCase[CreateClientRequestDTO, ClientResponseDTO]):
    """Use case for creating a new client."""

    def __init__(
        self,
        repository: WorkspaceRepository,
        clock: Optional[Clock] = None,
        workspace_service: Optional[WorkspaceService] = None
    ):
        super().__init__(repository, clock)
        self.workspace_service = workspace_service or WorkspaceService()

    async def _execute_command_logic(self, request: CreateClientRequestDTO, workspace: Workspace, now: datetime):
        updated, client = self.workspace_service.add_client(workspace, request.name, request.email)
        return updated, ClientResponseDTO.from_domain(client)


class DeleteClientUseCase(CommandUseCase[DeleteClientRequestDTO, bool]):
    """Use case deleting a client with its projects and todos."""

    def __init__(
        self,
        repository: WorkspaceRepository,
        clock: Optional[Clock] = None,
        workspace_service: Optional[WorkspaceService] = None
    ):
        super().__init__(repository, clock)
        self.workspace_service = workspace_service or WorkspaceService()

    async def _execute_command_logic(self, request: DeleteClientRequestDTO, workspace: Workspace, now: datetime):
        updated = self.workspace_service.delete_client(workspace, request.client_id)
        logger.info(f"Client {request.client_id} deleted for owner {self.owner_id}")
        return updated, True


class MoveClientUseCase(CommandUseCase[MoveClientRequestDTO, List[ClientResponseDTO]]):
    """
    Use case dragging a client onto another one of the same priority tier.
    Returns the client list in its new order.
    """

    def __init__(
        self,
        repository: WorkspaceRepository,
        clock: Optional[Clock] = None,
        workspace_service: Optional[WorkspaceService] = None
    ):
        super().__init__(repository, clock)
        self.workspace_service = workspace_service or WorkspaceService()

    async def _execute_command_logic(self, request: MoveClientRequestDTO, workspace: Workspace, now: datetime):
        updated = self.workspace_service.move_client(workspace, request.dragged_id, request.target_id)
        if updated is workspace:
            logger.info(f"Client {request.dragged_id} kept in place: not in the tier of {request.target_id}")
        return updated, _sorted_client_dtos(self.workspace_service.ranking_service, updated)
