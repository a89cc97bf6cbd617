"""
Repository implementations.
"""

from .in_memory_workspace_repository import InMemoryWorkspaceRepository

__all__ = ["InMemoryWorkspaceRepository"]
