"""
Domain services for the billing tracker.
"""

from .financial_service import FinancialService
from .payment_status_service import PaymentStatusService
from .aggregation_service import AggregationService, IncomeTotals, ClientIncome
from .ranking_service import RankingService
from .task_board_service import TaskBoardService, TaskBoard, TaskGroup
from .workspace_service import WorkspaceService

__all__ = [
    "FinancialService",
    "PaymentStatusService",
    "AggregationService",
    "IncomeTotals",
    "ClientIncome",
    "RankingService",
    "TaskBoardService",
    "TaskBoard",
    "TaskGroup",
    "WorkspaceService",
]
