"""
Unit tests for workspace use cases.
"""

import asyncio

import pytest
from datetime import date, datetime

from billtrack.application.dto.workspace_dto import (
    AddPaymentRequestDTO,
    CreateClientRequestDTO,
    CreateProjectRequestDTO,
    CreateTodoRequestDTO,
    DashboardRequestDTO,
    DeleteClientRequestDTO,
    DeletePaymentRequestDTO,
    ListClientsRequestDTO,
    MoveClientRequestDTO,
    ProjectRequestDTO,
    ReorderTodosRequestDTO,
    SetPaymentStatusRequestDTO,
    SetPriorityRequestDTO,
    SetWorkStatusRequestDTO,
    TaskBoardRequestDTO,
    TodoRequestDTO,
    ToggleTodoRequestDTO,
    UpdateProjectRequestDTO
)
from billtrack.application.use_cases import (
    AddPaymentUseCase,
    AddTodoUseCase,
    CreateClientUseCase,
    CreateProjectUseCase,
    DeleteClientUseCase,
    DeletePaymentUseCase,
    DeleteTodoUseCase,
    DuplicateProjectUseCase,
    GetDashboardUseCase,
    GetTaskBoardUseCase,
    ListClientsUseCase,
    MoveClientUseCase,
    ReorderTodosUseCase,
    SetPaymentStatusUseCase,
    SetPriorityUseCase,
    SetWorkStatusUseCase,
    ToggleTodoUseCase,
    UpdateProjectUseCase
)
from billtrack.infrastructure.repositories.in_memory_workspace_repository import InMemoryWorkspaceRepository


OWNER = "owner-1"
NOW = datetime(2024, 5, 1, 12, 0)


def fixed_clock():
    return NOW


class YieldingRepository(InMemoryWorkspaceRepository):
    """Repository giving other tasks a turn between load and save."""

    async def load(self, owner_id):
        workspace = await super().load(owner_id)
        await asyncio.sleep(0)
        return workspace


class TestWorkspaceUseCases:
    """Test cases for workspace use cases against the in-memory repository."""

    def setup_method(self):
        """Set up test fixtures."""
        self.repository = InMemoryWorkspaceRepository()
        self.repository.seed(OWNER, {
            "clients": [
                {"id": "c1", "name": "Acme"},
                {"id": "c2", "name": "Globex"},
            ],
            "projects": [
                {
                    "id": "p1",
                    "clientId": "c1",
                    "name": "Site",
                    "value": 1000,
                    "status": "attesa di pagamento",
                    "priority": "media",
                    "createdAt": "2023-12-01T10:00:00",
                },
                {
                    "id": "p2",
                    "clientId": "c2",
                    "name": "Logo",
                    "value": 400,
                    "workStatus": "in_progress",
                    "paymentStatus": "to_invoice",
                    "priority": "high",
                    "createdAt": "2024-02-01T10:00:00",
                },
            ],
            "todos": [
                {"id": "t1", "projectId": "p1", "task": "Deploy", "dueDate": "2024-04-30"},
                {"id": "t2", "projectId": "p2", "task": "Sketch", "dueDate": "2024-05-01", "income": 100},
                {"id": "t3", "projectId": "p2", "task": "Ideas"},
            ],
        })

    def _use_case(self, use_case_cls):
        return use_case_cls(self.repository, fixed_clock).for_owner(OWNER)

    @pytest.mark.asyncio
    async def test_add_payment_marks_paid(self):
        """Test a payment covering the total marks the project paid."""
        result = await self._use_case(AddPaymentUseCase).execute(
            AddPaymentRequestDTO(project_id="p1", amount=1000, date=date(2024, 5, 1))
        )

        assert result.success is True
        assert result.data.payment_status == "paid"
        assert result.data.paid_at == NOW
        assert result.data.remaining == 0

        stored = await self.repository.load(OWNER)
        assert stored.get_project("p1").payment_status.value == "paid"

    @pytest.mark.asyncio
    async def test_delete_payment_reverts_status(self):
        """Test removing the only payment reverts to invoiced."""
        added = await self._use_case(AddPaymentUseCase).execute(
            AddPaymentRequestDTO(project_id="p1", amount=1000, date=date(2024, 5, 1))
        )
        payment_id = added.data.payments[0].id

        result = await self._use_case(DeletePaymentUseCase).execute(
            DeletePaymentRequestDTO(project_id="p1", payment_id=payment_id)
        )

        assert result.data.payment_status == "invoiced"
        assert result.data.paid_at is None
        assert result.data.payments == []

    @pytest.mark.asyncio
    async def test_partial_payment_remaining(self):
        """Test a partial payment leaves the rest outstanding."""
        result = await self._use_case(AddPaymentUseCase).execute(
            AddPaymentRequestDTO(project_id="p1", amount=300, date=date(2024, 5, 1))
        )

        assert result.data.payment_status == "partially_paid"
        assert result.data.remaining == 700

    @pytest.mark.asyncio
    async def test_payment_on_unknown_project(self):
        """Test an unknown project yields a not found error."""
        result = await self._use_case(AddPaymentUseCase).execute(
            AddPaymentRequestDTO(project_id="nope", amount=10, date=date(2024, 5, 1))
        )

        assert result.success is False
        assert result.error_code == "ENTITY_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_set_payment_status(self):
        """Test a manual status change is stored."""
        result = await self._use_case(SetPaymentStatusUseCase).execute(
            SetPaymentStatusRequestDTO(project_id="p2", payment_status="invoiced")
        )

        assert result.data.payment_status == "invoiced"

    @pytest.mark.asyncio
    async def test_dashboard(self):
        """Test dashboard totals, chart and available years."""
        await self._use_case(AddPaymentUseCase).execute(
            AddPaymentRequestDTO(project_id="p1", amount=250, date=date(2024, 3, 5))
        )

        result = await self._use_case(GetDashboardUseCase).execute(DashboardRequestDTO(year=2024, month=3))

        assert result.data.totals.collected == 250
        assert result.data.totals.future == 750 + 500
        assert result.data.totals.potential == 0
        assert [row.client_id for row in result.data.chart] == ["c1", "c2"]
        assert result.data.available_years == [2024, 2023]

    @pytest.mark.asyncio
    async def test_list_clients_sorted_by_priority(self):
        """Test the client list puts the high priority client first."""
        result = await self._use_case(ListClientsUseCase).execute(ListClientsRequestDTO())

        assert [c.id for c in result.data] == ["c2", "c1"]
        assert result.data[0].priority == "high"
        assert result.data[1].priority == "medium"

    @pytest.mark.asyncio
    async def test_create_and_delete_client(self):
        """Test creating a client then deleting it with its projects."""
        created = await self._use_case(CreateClientUseCase).execute(CreateClientRequestDTO(name="Initech"))
        assert created.data.name == "Initech"

        await self._use_case(DeleteClientUseCase).execute(DeleteClientRequestDTO(client_id="c2"))
        workspace = await self.repository.load(OWNER)

        assert [c.id for c in workspace.clients] == ["c1", created.data.id]
        assert workspace.find_project("p2") is None
        assert [t.id for t in workspace.todos] == ["t1"]

    @pytest.mark.asyncio
    async def test_create_project_and_todo(self):
        """Test creating a project and a todo on it."""
        project = await self._use_case(CreateProjectUseCase).execute(
            CreateProjectRequestDTO(client_id="c1", name="Shop", value=800)
        )
        assert project.data.work_status == "quote_to_send"
        assert project.data.created_at == NOW

        todo = await self._use_case(AddTodoUseCase).execute(
            CreateTodoRequestDTO(project_id=project.data.id, task="Catalog", income=200)
        )
        assert todo.data.project_id == project.data.id
        assert todo.data.completed is False

    @pytest.mark.asyncio
    async def test_duplicate_project(self):
        """Test duplicating a project copies its todos."""
        result = await self._use_case(DuplicateProjectUseCase).execute(ProjectRequestDTO(project_id="p2"))

        assert result.data.name == "Logo (Copy)"
        assert result.data.total == 500
        workspace = await self.repository.load(OWNER)
        assert len(workspace.todos_for(result.data.id)) == 2

    @pytest.mark.asyncio
    async def test_task_board(self):
        """Test the task board groups todos around today."""
        result = await self._use_case(GetTaskBoardUseCase).execute(TaskBoardRequestDTO())

        assert result.data.today == date(2024, 5, 1)
        assert [t.id for t in result.data.overdue] == ["t1"]
        assert [t.id for t in result.data.due_today] == ["t2"]
        assert [t.id for t in result.data.no_date] == ["t3"]
        assert result.data.due_today[0].context == "Globex / Logo"

    @pytest.mark.asyncio
    async def test_reorder_todos(self):
        """Test manual ordering is stored and reflected on the board."""
        result = await self._use_case(ReorderTodosUseCase).execute(
            ReorderTodosRequestDTO(todo_ids=["t1", "t2"], base_order=10)
        )
        assert [t.order for t in result.data] == [10, 11]

        board = await self._use_case(GetTaskBoardUseCase).execute(TaskBoardRequestDTO(today=date(2024, 6, 1)))
        assert [t.id for t in board.data.overdue] == ["t1", "t2"]

    @pytest.mark.asyncio
    async def test_reorder_todos_default_base_order(self):
        """Test the clock timestamp is used when no base order is given."""
        result = await self._use_case(ReorderTodosUseCase).execute(ReorderTodosRequestDTO(todo_ids=["t3"]))

        assert result.data[0].order == int(NOW.timestamp() * 1000)

    @pytest.mark.asyncio
    async def test_reorder_todos_rejects_duplicates(self):
        """Test a todo listed twice is a business rule violation."""
        result = await self._use_case(ReorderTodosUseCase).execute(
            ReorderTodosRequestDTO(todo_ids=["t1", "t1"], base_order=10)
        )

        assert result.success is False
        assert result.error_code == "BUSINESS_RULE_VIOLATION"

    @pytest.mark.asyncio
    async def test_create_project_with_priority(self):
        """Test a priority given at creation ranks the client."""
        result = await self._use_case(CreateProjectUseCase).execute(
            CreateProjectRequestDTO(client_id="c1", name="Shop", value=800, priority="high")
        )

        assert result.data.priority == "high"
        clients = await self._use_case(ListClientsUseCase).execute(ListClientsRequestDTO())
        assert [c.priority for c in clients.data] == ["high", "high"]

    @pytest.mark.asyncio
    async def test_set_work_status_moves_income_bucket(self):
        """Test sending a project back to quote turns its balance into potential income."""
        result = await self._use_case(SetWorkStatusUseCase).execute(
            SetWorkStatusRequestDTO(project_id="p2", work_status="quote_sent")
        )
        assert result.data.work_status == "quote_sent"

        dashboard = await self._use_case(GetDashboardUseCase).execute(DashboardRequestDTO())
        assert dashboard.data.totals.future == 1000
        assert dashboard.data.totals.potential == 500

    @pytest.mark.asyncio
    async def test_set_priority_reorders_clients(self):
        """Test lowering a priority moves its client down."""
        result = await self._use_case(SetPriorityUseCase).execute(
            SetPriorityRequestDTO(project_id="p2", priority="low")
        )
        assert result.data.priority == "low"

        clients = await self._use_case(ListClientsUseCase).execute(ListClientsRequestDTO())
        assert [c.id for c in clients.data] == ["c1", "c2"]

    @pytest.mark.asyncio
    async def test_update_project(self):
        """Test editing the value keeps the other fields."""
        result = await self._use_case(UpdateProjectUseCase).execute(
            UpdateProjectRequestDTO(project_id="p1", value=1500)
        )

        assert result.data.name == "Site"
        assert result.data.total == 1500
        assert result.data.remaining == 1500

    @pytest.mark.asyncio
    async def test_toggle_and_delete_todo(self):
        """Test completed todos leave the board and deleted ones are gone."""
        toggled = await self._use_case(ToggleTodoUseCase).execute(
            ToggleTodoRequestDTO(todo_id="t2", completed=True)
        )
        assert toggled.data.completed is True

        deleted = await self._use_case(DeleteTodoUseCase).execute(TodoRequestDTO(todo_id="t3"))
        assert deleted.data is True

        board = await self._use_case(GetTaskBoardUseCase).execute(TaskBoardRequestDTO())
        assert board.data.due_today == []
        assert board.data.no_date == []
        workspace = await self.repository.load(OWNER)
        assert [t.id for t in workspace.todos] == ["t1", "t2"]

    @pytest.mark.asyncio
    async def test_move_client(self):
        """Test clients move only within their tier."""
        kept = await self._use_case(MoveClientUseCase).execute(
            MoveClientRequestDTO(dragged_id="c1", target_id="c2")
        )
        assert [c.id for c in kept.data] == ["c2", "c1"]

        await self._use_case(SetPriorityUseCase).execute(SetPriorityRequestDTO(project_id="p1", priority="high"))
        moved = await self._use_case(MoveClientUseCase).execute(
            MoveClientRequestDTO(dragged_id="c2", target_id="c1")
        )
        assert [c.id for c in moved.data] == ["c2", "c1"]
        workspace = await self.repository.load(OWNER)
        assert [c.id for c in workspace.clients] == ["c2", "c1"]

    @pytest.mark.asyncio
    async def test_concurrent_commands_keep_every_write(self):
        """Test commands for one owner run one after the other."""
        self.repository = YieldingRepository(mapper=self.repository.mapper)
        self.repository.seed(OWNER, {
            "clients": [{"id": "c1", "name": "Acme"}],
            "projects": [{"id": "p1", "clientId": "c1", "name": "Site", "value": 1000}],
        })

        await asyncio.gather(
            self._use_case(AddPaymentUseCase).execute(
                AddPaymentRequestDTO(project_id="p1", amount=300, date=date(2024, 5, 1))
            ),
            self._use_case(AddPaymentUseCase).execute(
                AddPaymentRequestDTO(project_id="p1", amount=200, date=date(2024, 5, 1))
            ),
        )

        project = (await self.repository.load(OWNER)).get_project("p1")
        assert sorted(p.amount for p in project.payments) == [200, 300]
        assert project.payment_status.value == "partially_paid"
        assert self.repository.active_owners == 0
