"""
Workspace snapshot.
The full set of entities owned by one user, passed whole into the core
services and returned whole from every mutation.
"""

from dataclasses import dataclass, field, replace
from typing import Dict, Iterable, List, Optional, Tuple

from billtrack.domain.models.base import EntityNotFoundError
from billtrack.domain.models.client import Client
from billtrack.domain.models.project import Project
from billtrack.domain.models.todo import Todo


@dataclass(frozen=True)
class Workspace:
    """Immutable snapshot of clients, projects and todos."""

    clients: Tuple[Client, ...] = field(default_factory=tuple)
    projects: Tuple[Project, ...] = field(default_factory=tuple)
    todos: Tuple[Todo, ...] = field(default_factory=tuple)

    @classmethod
    def of(
        cls,
        clients: Iterable[Client] = (),
        projects: Iterable[Project] = (),
        todos: Iterable[Todo] = ()
    ) -> "Workspace":
        return cls(tuple(clients), tuple(projects), tuple(todos))

    def with_changes(self, **changes) -> "Workspace":
        """Return a copy with the given collections replaced."""
        return replace(self, **{key: tuple(value) for key, value in changes.items()})

    def find_client(self, client_id: str) -> Optional[Client]:
        return next((c for c in self.clients if c.id == client_id), None)

    def find_project(self, project_id: str) -> Optional[Project]:
        return next((p for p in self.projects if p.id == project_id), None)

    def find_todo(self, todo_id: str) -> Optional[Todo]:
        return next((t for t in self.todos if t.id == todo_id), None)

    def get_client(self, client_id: str) -> Client:
        client = self.find_client(client_id)
        if client is None:
            raise EntityNotFoundError("Client", client_id)
        return client

    def get_project(self, project_id: str) -> Project:
        project = self.find_project(project_id)
        if project is None:
            raise EntityNotFoundError("Project", project_id)
        return project

    def get_todo(self, todo_id: str) -> Todo:
        todo = self.find_todo(todo_id)
        if todo is None:
            raise EntityNotFoundError("Todo", todo_id)
        return todo

    def todos_for(self, project_id: str) -> List[Todo]:
        return [t for t in self.todos if t.project_id == project_id]

    def projects_by_client(self) -> Dict[str, List[Project]]:
        grouped: Dict[str, List[Project]] = {}
        for project in self.projects:
            grouped.setdefault(project.client_id, []).append(project)
        return grouped
