"""
In-memory workspace repository.
Keeps raw records per owner so that every load goes through the mappers,
including legacy-shaped data seeded from an older export.
"""

import asyncio
import copy
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Optional

from billtrack.domain.models.workspace import Workspace
from billtrack.domain.repositories.workspace_repository import WorkspaceRepository
from billtrack.infrastructure.mappers.workspace_mapper import WorkspaceMapper

logger = logging.getLogger(__name__)


class InMemoryWorkspaceRepository(WorkspaceRepository):
    """Workspace repository backed by a dictionary of raw records."""

    def __init__(self, mapper: Optional[WorkspaceMapper] = None):
        self.mapper = mapper or WorkspaceMapper()
        self._records: Dict[str, Dict[str, Any]] = {}
        # Locks live only while a transaction holds or awaits them
        self._locks: Dict[str, asyncio.Lock] = {}
        self._lock_users: Dict[str, int] = {}

    def seed(self, owner_id: str, raw: Dict[str, Any]) -> None:
        """Store raw (possibly legacy) records for an owner."""
        self._records[owner_id] = copy.deepcopy(raw)

    def raw(self, owner_id: str) -> Optional[Dict[str, Any]]:
        return copy.deepcopy(self._records.get(owner_id))

    @property
    def active_owners(self) -> int:
        """Number of owners with a transaction running or waiting."""
        return len(self._locks)

    @asynccontextmanager
    async def transaction(self, owner_id: str) -> AsyncIterator[None]:
        lock = self._locks.setdefault(owner_id, asyncio.Lock())
        self._lock_users[owner_id] = self._lock_users.get(owner_id, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._lock_users[owner_id] -= 1
            if not self._lock_users[owner_id]:
                del self._lock_users[owner_id]
                del self._locks[owner_id]

    async def load(self, owner_id: str) -> Workspace:
        raw = self._records.get(owner_id)
        if raw is None:
            logger.debug(f"No workspace stored for owner {owner_id}")
            return Workspace()
        return self.mapper.to_domain(raw)

    async def save(self, owner_id: str, workspace: Workspace) -> None:
        self._records[owner_id] = self.mapper.to_dict(workspace)
        logger.debug(
            f"Saved workspace for owner {owner_id}: "
            f"{len(workspace.clients)} clients, {len(workspace.projects)} projects, "
            f"{len(workspace.todos)} todos"
        )
