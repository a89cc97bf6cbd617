"""Ranking service for the client sidebar.
Derives client priority from projects and orders clients by tier.
"""

from typing import Dict, Iterable, List, Optional, Set

from billtrack.domain.models.client import Client
from billtrack.domain.models.project import Project, ProjectPriority


class RankingService:
    """
    Domain service for client priority, ordering and inactivity.

    A client's effective priority is the highest priority among its active
    projects. Clients without active projects have no priority and sort
    with the LOW tier.
    """

    def client_priorities(self, projects: Iterable[Project]) -> Dict[str, ProjectPriority]:
        """Effective priority per client id, for clients with active projects."""
        priorities: Dict[str, ProjectPriority] = {}
        for project in projects:
            if not project.is_active:
                continue
            current = priorities.get(project.client_id)
            if current is None or project.priority.rank > current.rank:
                priorities[project.client_id] = project.priority
        return priorities

    def effective_priority(self, client_id: str, projects: Iterable[Project]) -> Optional[ProjectPriority]:
        return self.client_priorities(
            p for p in projects if p.client_id == client_id
        ).get(client_id)

    def tier(self, priority: Optional[ProjectPriority]) -> ProjectPriority:
        """Sorting tier; an undefined priority belongs to LOW."""
        return priority or ProjectPriority.LOW

    def sort_clients(self, clients: Iterable[Client], projects: Iterable[Project]) -> List[Client]:
        """
        Stable three-way bucket sort: HIGH, then MEDIUM, then LOW or undefined.
        Relative input order is preserved inside each tier.
        """
        priorities = self.client_priorities(projects)
        buckets: Dict[ProjectPriority, List[Client]] = {
            ProjectPriority.HIGH: [],
            ProjectPriority.MEDIUM: [],
            ProjectPriority.LOW: [],
        }
        for client in clients:
            buckets[self.tier(priorities.get(client.id))].append(client)

        return buckets[ProjectPriority.HIGH] + buckets[ProjectPriority.MEDIUM] + buckets[ProjectPriority.LOW]

    def inactive_client_ids(self, clients: Iterable[Client], projects: Iterable[Project]) -> Set[str]:
        """
        Clients with at least one project where every project is delivered
        and paid.
        """
        by_client: Dict[str, List[Project]] = {}
        for project in projects:
            by_client.setdefault(project.client_id, []).append(project)

        return {
            client.id
            for client in clients
            if by_client.get(client.id) and all(p.is_closed for p in by_client[client.id])
        }

    def is_inactive(self, client: Client, projects: Iterable[Project]) -> bool:
        return client.id in self.inactive_client_ids([client], projects)

    def share_tier(self, first_id: str, second_id: str, projects: Iterable[Project]) -> bool:
        """Whether two clients sit in the same sorting tier."""
        priorities = self.client_priorities(projects)
        return self.tier(priorities.get(first_id)) == self.tier(priorities.get(second_id))
