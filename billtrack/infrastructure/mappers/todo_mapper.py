"""
Todo mapper for converting between raw records and domain entities.
"""

from typing import Any, Dict

from billtrack.domain.models.base import ValidationError
from billtrack.domain.models.todo import Todo
from billtrack.infrastructure.mappers.base import parse_date, parse_number, pick


class TodoMapper:
    """Maps between Todo domain entity and raw records."""

    def to_domain(self, raw: Dict[str, Any]) -> Todo:
        if isinstance(raw, Todo):
            return raw
        todo_id = pick(raw, "id")
        if not todo_id:
            raise ValidationError("Todo id is required", "id")

        order = pick(raw, "order")
        return Todo(
            id=str(todo_id),
            project_id=str(pick(raw, "projectId", "project_id", default="")),
            task=pick(raw, "task", default="") or "",
            income=parse_number(pick(raw, "income"), "income"),
            completed=bool(pick(raw, "completed", default=False)),
            due_date=parse_date(pick(raw, "dueDate", "due_date"), "due_date"),
            order=int(order) if order is not None else None,
        )

    def to_dict(self, todo: Todo) -> Dict[str, Any]:
        return {
            "id": todo.id,
            "project_id": todo.project_id,
            "task": todo.task,
            "income": todo.income,
            "completed": todo.completed,
            "due_date": todo.due_date.isoformat() if todo.due_date else None,
            "order": todo.order,
        }
