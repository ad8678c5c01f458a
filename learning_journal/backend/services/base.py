"""
Base Service.

Base class for all services providing common patterns for business logic.
Services orchestrate repositories, wrap database failures, and log
what they do.

Usage:
    from learning_journal.backend.services.base import BaseService

    class TagService(BaseService):
        def __init__(self, session: AsyncSession) -> None:
            super().__init__(session)
            self.repo = TagRepository(session)

        async def list_tags(self) -> list[Tag]:
            return await self._execute_db_operation(
                "fetch tags", self.repo.get_all_by_name()
            )
"""

from collections.abc import Awaitable
from typing import Any, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from learning_journal.backend.core.exceptions import DatabaseError
from learning_journal.backend.core.logging import get_logger

T = TypeVar("T")


class BaseService:
    """
    Base class for all services.

    Provides:
    - Database session management
    - Logging context
    - Error wrapping for database operations

    Subclasses should:
    - Call super().__init__(session) in their __init__
    - Initialize repositories in __init__
    - Implement business logic methods
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize the service with a database session.

        Args:
            session: SQLAlchemy async session for database operations
        """
        self._session = session
        self._logger = get_logger(self.__class__.__module__)

    @property
    def session(self) -> AsyncSession:
        """Get the database session."""
        return self._session

    async def _execute_db_operation(
        self,
        operation: str,
        coro: Awaitable[T],
    ) -> T:
        """
        Execute a database operation with error handling.

        Any SQLAlchemy failure is logged with its cause and re-raised as
        DatabaseError carrying only a generic "Failed to <operation>"
        message. Application errors (e.g. NotFoundError) pass through.

        Args:
            operation: Human readable operation, e.g. "create entry"
            coro: Coroutine to execute

        Returns:
            Result of the coroutine

        Raises:
            DatabaseError: For any database error
        """
        try:
            return await coro
        except IntegrityError as e:
            self._logger.warning(
                "Database integrity error",
                extra={"operation": operation, "error": str(e)},
            )
            raise DatabaseError(f"Failed to {operation}") from e
        except SQLAlchemyError as e:
            self._logger.error(
                "Database error",
                extra={"operation": operation, "error": str(e)},
            )
            raise DatabaseError(f"Failed to {operation}") from e

    def _log_operation(
        self,
        operation: str,
        **context: Any,
    ) -> None:
        """
        Log a service operation with context.

        Args:
            operation: Description of the operation
            **context: Additional context to include in log
        """
        self._logger.info(
            operation,
            extra={"service": self.__class__.__name__, **context},
        )

    def _log_debug(
        self,
        message: str,
        **context: Any,
    ) -> None:
        """
        Log debug information.

        Args:
            message: Debug message
            **context: Additional context to include in log
        """
        self._logger.debug(
            message,
            extra={"service": self.__class__.__name__, **context},
        )
