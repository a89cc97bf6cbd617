"""Task board service.
Groups open todos by due date and orders them inside each group.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

from billtrack.domain.models.project import Project, ProjectPriority
from billtrack.domain.models.todo import Todo
from billtrack.domain.models.workspace import Workspace


UNKNOWN_CLIENT_LABEL = "Unknown client"


class TaskGroup(str, Enum):
    """Due date buckets of the task board."""
    OVERDUE = "overdue"
    TODAY = "today"
    UPCOMING = "upcoming"
    NO_DATE = "no_date"


@dataclass
class TaskBoard:
    """Open todos split into the four due date groups."""

    overdue: List[Todo] = field(default_factory=list)
    today: List[Todo] = field(default_factory=list)
    upcoming: List[Todo] = field(default_factory=list)
    no_date: List[Todo] = field(default_factory=list)

    def group(self, task_group: TaskGroup) -> List[Todo]:
        return getattr(self, task_group.value)


class TaskBoardService:
    """
    Domain service building the task board.

    Completed todos and todos of cancelled projects are left out. Within a
    group todos are ordered by manual order, then by the owning project's
    priority (highest first), then by due date, then by income (largest
    first).
    """

    def classify(self, todo: Todo, today: date) -> TaskGroup:
        if todo.due_date is None:
            return TaskGroup.NO_DATE
        if todo.due_date < today:
            return TaskGroup.OVERDUE
        if todo.due_date == today:
            return TaskGroup.TODAY
        return TaskGroup.UPCOMING

    def is_visible(self, todo: Todo, project: Optional[Project]) -> bool:
        if todo.completed:
            return False
        return not (project is not None and project.is_cancelled)

    def sort_key(self, todo: Todo, priority: ProjectPriority) -> Tuple:
        """
        Precedence tuple: manual order ascending (missing order counts as 0),
        priority descending, due date ascending, income descending.
        """
        return (
            todo.effective_order,
            -priority.rank,
            # Groups are all dated or all undated, so this only orders dates against dates
            todo.due_date is None,
            todo.due_date or date.min,
            -todo.income,
        )

    def build_board(self, workspace: Workspace, today: date) -> TaskBoard:
        projects: Dict[str, Project] = {p.id: p for p in workspace.projects}
        board = TaskBoard()

        for todo in workspace.todos:
            if not self.is_visible(todo, projects.get(todo.project_id)):
                continue
            board.group(self.classify(todo, today)).append(todo)

        def key(todo: Todo) -> Tuple:
            project = projects.get(todo.project_id)
            return self.sort_key(todo, project.priority if project else ProjectPriority.LOW)

        for task_group in TaskGroup:
            board.group(task_group).sort(key=key)
        return board

    def todos_by_due_date(self, todos: Iterable[Todo]) -> Dict[date, List[Todo]]:
        """Calendar grouping of dated todos, keeping input order per day."""
        calendar: Dict[date, List[Todo]] = {}
        for todo in todos:
            if todo.due_date is not None:
                calendar.setdefault(todo.due_date, []).append(todo)
        return calendar

    def task_context(self, todo: Todo, workspace: Workspace) -> str:
        """Human readable "client / project" label of a todo."""
        project = workspace.find_project(todo.project_id)
        if project is None:
            return ""
        client = workspace.find_client(project.client_id)
        client_name = client.name if client else UNKNOWN_CLIENT_LABEL
        return f"{client_name} / {project.name}"
