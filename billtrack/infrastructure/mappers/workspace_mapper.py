"""
Workspace mapper.
Converts a whole ``{clients, projects, todos}`` record set, normalizing
every record once on the way in.
"""

from typing import Any, Dict, Optional

from billtrack.domain.models.workspace import Workspace
from billtrack.infrastructure.mappers.client_mapper import ClientMapper
from billtrack.infrastructure.mappers.project_mapper import ProjectMapper
from billtrack.infrastructure.mappers.todo_mapper import TodoMapper


class WorkspaceMapper:
    """Maps between Workspace and raw record sets."""

    def __init__(
        self,
        client_mapper: Optional[ClientMapper] = None,
        project_mapper: Optional[ProjectMapper] = None,
        todo_mapper: Optional[TodoMapper] = None
    ):
        self.client_mapper = client_mapper or ClientMapper()
        self.project_mapper = project_mapper or ProjectMapper()
        self.todo_mapper = todo_mapper or TodoMapper()

    def to_domain(self, raw: Optional[Dict[str, Any]]) -> Workspace:
        raw = raw or {}
        return Workspace.of(
            clients=[self.client_mapper.to_domain(item) for item in raw.get("clients") or ()],
            projects=[self.project_mapper.to_domain(item) for item in raw.get("projects") or ()],
            todos=[self.todo_mapper.to_domain(item) for item in raw.get("todos") or ()],
        )

    def to_dict(self, workspace: Workspace) -> Dict[str, Any]:
        return {
            "clients": [self.client_mapper.to_dict(c) for c in workspace.clients],
            "projects": [self.project_mapper.to_dict(p) for p in workspace.projects],
            "todos": [self.todo_mapper.to_dict(t) for t in workspace.todos],
        }


def normalize_workspace(raw: Optional[Dict[str, Any]]) -> Workspace:
    return WorkspaceMapper().to_domain(raw)
