"""Financial service for project totals and balances.
Pure arithmetic over projects, their payments and their todos.
"""

from typing import Dict, Iterable

from billtrack.domain.models.project import Project, Payment
from billtrack.domain.models.todo import Todo


class FinancialService:
    """
    Domain service computing project total, paid amount and remaining balance.

    No validation happens here: negative values or NaN incomes are summed as
    received, and a negative remaining balance simply means overpayment.
    """

    def project_total(self, project: Project, todos: Iterable[Todo]) -> float:
        """Base value plus the income of every todo attached to the project."""
        return project.value + sum(
            todo.income for todo in todos if todo.project_id == project.id
        )

    def sum_payments(self, payments: Iterable[Payment]) -> float:
        return sum((payment.amount for payment in payments or ()), 0)

    def paid_amount(self, project: Project) -> float:
        """Sum of all payments recorded on the project, 0 without payments."""
        return self.sum_payments(project.payments)

    def remaining(self, project: Project, todos: Iterable[Todo]) -> float:
        """Project total minus paid amount; may be negative."""
        return self.project_total(project, todos) - self.paid_amount(project)

    def project_totals(
        self,
        projects: Iterable[Project],
        todos: Iterable[Todo]
    ) -> Dict[str, float]:
        """
        Compute every project's total in one pass over the todos.
        Todos pointing at unknown projects are ignored.
        """
        income_by_project: Dict[str, float] = {}
        for todo in todos:
            income_by_project[todo.project_id] = (
                income_by_project.get(todo.project_id, 0) + todo.income
            )

        return {
            project.id: project.value + income_by_project.get(project.id, 0)
            for project in projects
        }
