"""
Base use case classes for the application layer.
Provides common patterns and structure for use case implementations.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional, TypeVar, Generic
from dataclasses import dataclass
from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from billtrack.config import settings
from billtrack.domain.models.base import DomainException, ValidationError, BusinessRuleViolation
from billtrack.domain.models.workspace import Workspace
from billtrack.domain.repositories.workspace_repository import WorkspaceRepository

logger = logging.getLogger(__name__)


T = TypeVar('T')
R = TypeVar('R')

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Current time in the configured timezone."""
    return datetime.now(ZoneInfo(settings.timezone))


@dataclass
class UseCaseResult(Generic[T]):
    """Result wrapper for use case operations."""

    success: bool
    data: Optional[T] = None
    error: Optional[str] = None
    error_code: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None

    @classmethod
    def success_result(cls, data: T, metadata: Optional[Dict[str, Any]] = None) -> "UseCaseResult[T]":
        """Create a successful result."""
        return cls(success=True, data=data, metadata=metadata)

    @classmethod
    def error_result(
        cls,
        error: str,
        error_code: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None
    ) -> "UseCaseResult[T]":
        """Create an error result."""
        return cls(
            success=False,
            error=error,
            error_code=error_code,
            metadata=metadata
        )

    @classmethod
    def from_exception(cls, exc: Exception) -> "UseCaseResult[T]":
        """Create error result from exception."""
        if isinstance(exc, ValidationError):
            return cls.error_result(exc.message, "VALIDATION_ERROR")
        elif isinstance(exc, BusinessRuleViolation):
            return cls.error_result(exc.message, "BUSINESS_RULE_VIOLATION")
        elif isinstance(exc, DomainException):
            return cls.error_result(exc.message, exc.code)
        else:
            return cls.error_result(str(exc), "UNKNOWN_ERROR")

    def unwrap(self) -> T:
        """Return the data or raise the equivalent domain exception."""
        if self.success:
            return self.data
        raise DomainException(self.error or "Use case failed", self.error_code)


class BaseUseCase(ABC, Generic[T, R]):
    """
    Base class for all use cases.
    Provides common structure and error handling.
    """

    def __init__(self):
        self.execution_start: Optional[datetime] = None
        self.execution_end: Optional[datetime] = None

    async def execute(self, request: T) -> UseCaseResult[R]:
        """
        Execute the use case with proper error handling and logging.
        """
        self.execution_start = datetime.now(timezone.utc)

        try:
            # Validate input
            await self._validate_request(request)

            # Execute business logic
            result = await self._execute_business_logic(request)

            self.execution_end = datetime.now(timezone.utc)
            execution_time = (self.execution_end - self.execution_start).total_seconds()

            return UseCaseResult.success_result(
                result,
                metadata={
                    "execution_time_seconds": execution_time,
                    "executed_at": self.execution_end.isoformat()
                }
            )

        except Exception as exc:
            self.execution_end = datetime.now(timezone.utc)
            execution_time = (self.execution_end - self.execution_start).total_seconds()

            if isinstance(exc, DomainException):
                logger.info(f"{type(self).__name__} rejected: {exc.message}")
            else:
                logger.error(f"{type(self).__name__} failed: {exc}", exc_info=True)

            error_result = UseCaseResult.from_exception(exc)
            error_result.metadata = {
                "execution_time_seconds": execution_time,
                "failed_at": self.execution_end.isoformat(),
                "exception_type": type(exc).__name__
            }

            return error_result

    async def _validate_request(self, request: T) -> None:
        """
        Validate the request. Override in subclasses if needed.
        """
        if hasattr(request, 'model_validate'):
            # Pydantic models
            request.model_validate(request.model_dump())

    @abstractmethod
    async def _execute_business_logic(self, request: T) -> R:
        """
        Execute the core business logic. Must be implemented by subclasses.
        """
        pass


class WorkspaceUseCase(BaseUseCase[T, R]):
    """
    Base class for use cases operating on one owner's workspace.
    The owner is set with ``for_owner`` before executing.
    """

    def __init__(self, repository: WorkspaceRepository, clock: Optional[Clock] = None):
        super().__init__()
        self.repository = repository
        self.clock = clock or system_clock
        self.owner_id: Optional[str] = None

    def for_owner(self, owner_id: str) -> "WorkspaceUseCase[T, R]":
        """Set the workspace owner context."""
        self.owner_id = owner_id
        return self

    async def _validate_request(self, request: T) -> None:
        await super()._validate_request(request)

        if not self.owner_id:
            raise ValidationError("Workspace owner is required", "owner_id")

    async def _load(self) -> Workspace:
        return await self.repository.load(self.owner_id)


class QueryUseCase(WorkspaceUseCase[T, R]):
    """
    Base class for query use cases (read operations).
    """

    async def _execute_business_logic(self, request: T) -> R:
        workspace = await self._load()
        return await self._execute_query(request, workspace)

    @abstractmethod
    async def _execute_query(self, request: T, workspace: Workspace) -> R:
        """Compute the result from the loaded workspace."""
        pass


class CommandUseCase(WorkspaceUseCase[T, R]):
    """
    Base class for command use cases (write operations).
    Loads the workspace, applies one mutation and saves the new snapshot,
    all inside the owner's repository transaction.
    """

    async def _execute_business_logic(self, request: T) -> R:
        async with self.repository.transaction(self.owner_id):
            workspace = await self._load()
            updated, result = await self._execute_command_logic(request, workspace, self.clock())
            await self.repository.save(self.owner_id, updated)
        return result

    @abstractmethod
    async def _execute_command_logic(self, request: T, workspace: Workspace, now: datetime):
        """
        Execute the command logic. Must be implemented by subclasses.
        Returns the updated workspace and the use case result.
        """
        pass
