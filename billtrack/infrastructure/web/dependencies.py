"""
FastAPI dependencies.
"""

from functools import lru_cache

from billtrack.application.use_cases.base_use_case import Clock, system_clock
from billtrack.domain.repositories.workspace_repository import WorkspaceRepository
from billtrack.infrastructure.repositories.in_memory_workspace_repository import InMemoryWorkspaceRepository


@lru_cache()
def _default_repository() -> InMemoryWorkspaceRepository:
    return InMemoryWorkspaceRepository()


def get_workspace_repository() -> WorkspaceRepository:
    """Dependency to get the workspace repository."""
    return _default_repository()


def get_clock() -> Clock:
    """Dependency to get the clock used to stamp mutations."""
    return system_clock
