"""
Mappers between raw records and domain entities.
"""

from .client_mapper import ClientMapper
from .project_mapper import PaymentMapper, ProjectMapper, normalize_project
from .todo_mapper import TodoMapper
from .workspace_mapper import WorkspaceMapper, normalize_workspace

__all__ = [
    "ClientMapper",
    "PaymentMapper",
    "ProjectMapper",
    "TodoMapper",
    "WorkspaceMapper",
    "normalize_project",
    "normalize_workspace",
]
