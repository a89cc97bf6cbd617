"""Workspace service.
Copy-on-write mutations over a workspace snapshot.

Every method returns a new ``Workspace``; the input is never modified.
Payment mutations always run the payment status rule in the same call.
"""

import logging
from dataclasses import replace
from datetime import date, datetime
from typing import Iterable, Optional, Sequence, Tuple

from billtrack.domain.models.base import BusinessRuleViolation, EntityNotFoundError, new_id
from billtrack.domain.models.client import Client
from billtrack.domain.models.project import (
    Payment,
    PaymentStatus,
    Project,
    ProjectPriority,
    WorkStatus
)
from billtrack.domain.models.todo import Todo
from billtrack.domain.models.workspace import Workspace
from billtrack.domain.services.payment_status_service import PaymentStatusService
from billtrack.domain.services.ranking_service import RankingService

logger = logging.getLogger(__name__)

COPY_SUFFIX = " (Copy)"


class WorkspaceService:
    """
    Domain service applying user actions to a workspace snapshot.
    """

    def __init__(
        self,
        payment_status_service: Optional[PaymentStatusService] = None,
        ranking_service: Optional[RankingService] = None
    ):
        self.payment_status_service = payment_status_service or PaymentStatusService()
        self.ranking_service = ranking_service or RankingService()

    # Clients

    def add_client(self, workspace: Workspace, name: str, email: Optional[str] = None) -> Tuple[Workspace, Client]:
        client = Client.create(name=name, email=email)
        return workspace.with_changes(clients=workspace.clients + (client,)), client

    def delete_client(self, workspace: Workspace, client_id: str) -> Workspace:
        """Remove a client together with its projects and their todos."""
        workspace.get_client(client_id)
        project_ids = {p.id for p in workspace.projects if p.client_id == client_id}

        logger.debug(f"Deleting client {client_id} with {len(project_ids)} projects")
        return workspace.with_changes(
            clients=[c for c in workspace.clients if c.id != client_id],
            projects=[p for p in workspace.projects if p.id not in project_ids],
            todos=[t for t in workspace.todos if t.project_id not in project_ids],
        )

    def move_client(self, workspace: Workspace, dragged_id: str, target_id: str) -> Workspace:
        """
        Move a client to the position of another client.
        Only allowed between clients of the same priority tier; otherwise
        the workspace is returned unchanged.
        """
        if dragged_id == target_id:
            return workspace

        clients = list(workspace.clients)
        ids = [c.id for c in clients]
        if dragged_id not in ids:
            raise EntityNotFoundError("Client", dragged_id)
        if target_id not in ids:
            raise EntityNotFoundError("Client", target_id)

        if not self.ranking_service.share_tier(dragged_id, target_id, workspace.projects):
            return workspace

        drop_index = ids.index(target_id)
        dragged = clients.pop(ids.index(dragged_id))
        clients.insert(drop_index, dragged)
        return workspace.with_changes(clients=clients)

    # Projects

    def add_project(
        self,
        workspace: Workspace,
        client_id: str,
        name: str,
        value: float,
        now: datetime,
        notes: Optional[str] = None,
        priority: ProjectPriority = ProjectPriority.MEDIUM
    ) -> Tuple[Workspace, Project]:
        workspace.get_client(client_id)
        project = Project.create(
            client_id=client_id, name=name, value=value, now=now, notes=notes, priority=priority
        )
        return workspace.with_changes(projects=workspace.projects + (project,)), project

    def update_project(
        self,
        workspace: Workspace,
        project_id: str,
        name: Optional[str] = None,
        value: Optional[float] = None,
        notes: Optional[str] = None
    ) -> Workspace:
        project = workspace.get_project(project_id)
        changes = {}
        if name is not None:
            changes["name"] = name
        if value is not None:
            changes["value"] = value
        if notes is not None:
            changes["notes"] = notes
        return self._replace_project(workspace, replace(project, **changes))

    def set_work_status(self, workspace: Workspace, project_id: str, status: WorkStatus) -> Workspace:
        project = workspace.get_project(project_id)
        return self._replace_project(workspace, replace(project, work_status=status))

    def set_priority(self, workspace: Workspace, project_id: str, priority: ProjectPriority) -> Workspace:
        project = workspace.get_project(project_id)
        return self._replace_project(workspace, replace(project, priority=priority))

    def duplicate_project(self, workspace: Workspace, project_id: str, now: datetime) -> Tuple[Workspace, Project]:
        """
        Copy a project and its todos as a fresh quote.
        The copy has no payments, no paid_at and only open todos.
        """
        original = workspace.get_project(project_id)
        copy = replace(
            original,
            id=new_id(),
            name=f"{original.name}{COPY_SUFFIX}",
            work_status=WorkStatus.QUOTE_TO_SEND,
            payment_status=PaymentStatus.TO_INVOICE,
            created_at=now,
            paid_at=None,
            payments=(),
        )
        copied_todos = [
            replace(todo, id=new_id(), project_id=copy.id, completed=False)
            for todo in workspace.todos_for(project_id)
        ]
        return workspace.with_changes(
            projects=workspace.projects + (copy,),
            todos=workspace.todos + tuple(copied_todos),
        ), copy

    def delete_project(self, workspace: Workspace, project_id: str) -> Workspace:
        """Remove a project together with its todos."""
        workspace.get_project(project_id)
        return workspace.with_changes(
            projects=[p for p in workspace.projects if p.id != project_id],
            todos=[t for t in workspace.todos if t.project_id != project_id],
        )

    # Payments

    def add_payment(
        self,
        workspace: Workspace,
        project_id: str,
        amount: float,
        payment_date: date,
        now: datetime,
        notes: Optional[str] = None
    ) -> Tuple[Workspace, Payment]:
        project = workspace.get_project(project_id)
        payment = Payment.create(amount=amount, payment_date=payment_date, notes=notes)
        updated = self.payment_status_service.add_payment(
            project, payment, workspace.todos_for(project_id), now
        )
        return self._replace_project(workspace, updated), payment

    def delete_payment(self, workspace: Workspace, project_id: str, payment_id: str, now: datetime) -> Workspace:
        project = workspace.get_project(project_id)
        updated = self.payment_status_service.remove_payment(
            project, payment_id, workspace.todos_for(project_id), now
        )
        return self._replace_project(workspace, updated)

    def set_payment_status(
        self,
        workspace: Workspace,
        project_id: str,
        status: PaymentStatus,
        now: datetime
    ) -> Workspace:
        """Manual status pick; only the paid_at bookkeeping is applied."""
        project = workspace.get_project(project_id)
        updated = self.payment_status_service.set_manual_status(project, status, now)
        return self._replace_project(workspace, updated)

    # Todos

    def add_todo(
        self,
        workspace: Workspace,
        project_id: str,
        task: str,
        income: float = 0.0,
        due_date: Optional[date] = None
    ) -> Tuple[Workspace, Todo]:
        workspace.get_project(project_id)
        todo = Todo.create(project_id=project_id, task=task, income=income, due_date=due_date)
        return workspace.with_changes(todos=workspace.todos + (todo,)), todo

    def toggle_todo(self, workspace: Workspace, todo_id: str, completed: bool) -> Workspace:
        todo = workspace.get_todo(todo_id)
        return self._replace_todos(workspace, [replace(todo, completed=completed)])

    def delete_todo(self, workspace: Workspace, todo_id: str) -> Workspace:
        workspace.get_todo(todo_id)
        return workspace.with_changes(todos=[t for t in workspace.todos if t.id != todo_id])

    def reorder_todos(self, workspace: Workspace, ordered_ids: Sequence[str], base_order: int) -> Workspace:
        """Assign ``base_order + index`` as manual order to the listed todos."""
        if len(set(ordered_ids)) != len(ordered_ids):
            raise BusinessRuleViolation("A todo can appear only once in a reorder")
        reordered = [
            replace(workspace.get_todo(todo_id), order=base_order + index)
            for index, todo_id in enumerate(ordered_ids)
        ]
        return self._replace_todos(workspace, reordered)

    def _replace_project(self, workspace: Workspace, project: Project) -> Workspace:
        return workspace.with_changes(
            projects=[project if p.id == project.id else p for p in workspace.projects]
        )

    def _replace_todos(self, workspace: Workspace, todos: Iterable[Todo]) -> Workspace:
        updates = {todo.id: todo for todo in todos}
        return workspace.with_changes(
            todos=[updates.get(t.id, t) for t in workspace.todos]
        )
