"""
Repository interfaces for the domain layer.
"""

from .workspace_repository import WorkspaceRepository

__all__ = ["WorkspaceRepository"]
