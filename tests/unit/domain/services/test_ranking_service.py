"""
Unit tests for RankingService domain service.
"""

from billtrack.domain.models.client import Client
from billtrack.domain.models.project import (
    PaymentStatus,
    Project,
    ProjectPriority,
    WorkStatus
)
from billtrack.domain.services.ranking_service import RankingService


def _project(project_id, client_id, priority, work_status=WorkStatus.IN_PROGRESS,
             payment_status=PaymentStatus.TO_INVOICE):
    return Project(
        id=project_id,
        client_id=client_id,
        priority=priority,
        work_status=work_status,
        payment_status=payment_status,
    )


class TestRankingService:
    """Test cases for RankingService domain service."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = RankingService()
        self.clients = [
            Client(id="a", name="A"),
            Client(id="b", name="B"),
            Client(id="c", name="C"),
            Client(id="d", name="D"),
        ]
        self.projects = [
            _project("p1", "a", ProjectPriority.HIGH),
            _project("p2", "a", ProjectPriority.LOW),
            # B only has a cancelled project, so no effective priority
            _project("p3", "b", ProjectPriority.HIGH, work_status=WorkStatus.CANCELLED),
            _project("p4", "c", ProjectPriority.MEDIUM),
            _project("p5", "d", ProjectPriority.HIGH),
        ]

    def test_client_priorities_use_highest_active_project(self):
        """Test effective priority is the max over active projects."""
        priorities = self.service.client_priorities(self.projects)

        assert priorities == {
            "a": ProjectPriority.HIGH,
            "c": ProjectPriority.MEDIUM,
            "d": ProjectPriority.HIGH,
        }

    def test_effective_priority_undefined_without_active_projects(self):
        """Test a client with only closed or cancelled projects has no priority."""
        assert self.service.effective_priority("b", self.projects) is None
        assert self.service.effective_priority("a", self.projects) == ProjectPriority.HIGH

    def test_closed_projects_do_not_count(self):
        """Test delivered and paid projects are ignored for priority."""
        projects = [
            _project("p1", "a", ProjectPriority.HIGH, WorkStatus.DELIVERED, PaymentStatus.PAID),
            _project("p2", "a", ProjectPriority.LOW),
        ]
        assert self.service.effective_priority("a", projects) == ProjectPriority.LOW

    def test_sort_clients_by_tier(self):
        """Test HIGH first, MEDIUM next, LOW or undefined last, input order kept."""
        ordered = self.service.sort_clients(self.clients, self.projects)

        assert [c.id for c in ordered] == ["a", "d", "c", "b"]

    def test_sort_clients_is_stable_within_tier(self):
        """Test undefined and LOW share the last tier in input order."""
        clients = [Client(id="x", name="X"), Client(id="y", name="Y"), Client(id="z", name="Z")]
        projects = [
            _project("p1", "y", ProjectPriority.LOW),
            _project("p2", "z", ProjectPriority.MEDIUM),
        ]

        ordered = self.service.sort_clients(clients, projects)

        assert [c.id for c in ordered] == ["z", "x", "y"]

    def test_inactive_clients(self):
        """Test inactive means every project delivered and paid."""
        clients = [Client(id="x", name="X"), Client(id="y", name="Y"), Client(id="z", name="Z")]
        projects = [
            _project("p1", "x", ProjectPriority.LOW, WorkStatus.DELIVERED, PaymentStatus.PAID),
            _project("p2", "y", ProjectPriority.LOW, WorkStatus.DELIVERED, PaymentStatus.PAID),
            _project("p3", "y", ProjectPriority.LOW, WorkStatus.DELIVERED, PaymentStatus.INVOICED),
        ]

        assert self.service.inactive_client_ids(clients, projects) == {"x"}
        assert self.service.is_inactive(clients[0], projects) is True
        # A client without projects is not inactive
        assert self.service.is_inactive(clients[2], projects) is False

    def test_share_tier(self):
        """Test tier comparison treats undefined as LOW."""
        assert self.service.share_tier("a", "d", self.projects) is True
        assert self.service.share_tier("a", "c", self.projects) is False
        assert self.service.share_tier("b", "unknown", self.projects) is True
