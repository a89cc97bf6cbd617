"""
Workspace repository interface.
Defines the contract for loading and saving an owner's workspace.
"""

from abc import ABC, abstractmethod
from typing import AsyncContextManager

from billtrack.domain.models.workspace import Workspace


class WorkspaceRepository(ABC):
    """
    Repository interface for the workspace snapshot.
    The core services never call it; use cases load a snapshot, run the
    services and save the returned snapshot.
    """

    @abstractmethod
    async def load(self, owner_id: str) -> Workspace:
        """
        Load the owner's workspace.
        Returns an empty workspace when the owner has no data yet.
        """
        pass

    @abstractmethod
    async def save(self, owner_id: str, workspace: Workspace) -> None:
        """
        Persist the owner's workspace.
        Saves must be applied in the order they were issued.
        """
        pass

    @abstractmethod
    def transaction(self, owner_id: str) -> AsyncContextManager[None]:
        """
        Async context manager serializing one load, mutate and save cycle
        for the owner. Commands for the same owner run one at a time inside it.
        """
        pass
