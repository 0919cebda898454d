"""
Unit of Work - one transaction per use case.

A use case runs inside `async with uow:`. Leaving the block normally commits,
leaving it with an exception rolls back, and the session is closed either way.
Each request or CLI command opens its own unit of work, so aggregates are
never shared between concurrent operations.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
import logging

from app.domain.exceptions import PersistenceError

if TYPE_CHECKING:
    from app.core.interfaces import IEmployeeRepository

logger = logging.getLogger(__name__)


class AbstractUnitOfWork(ABC):
    """Transaction boundary exposing the employee repository"""

    employees: 'IEmployeeRepository'

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        try:
            if exc_type is None:
                await self.commit()
            else:
                await self.rollback()
        finally:
            await self.close()

    @abstractmethod
    async def commit(self):
        """Make pending changes durable"""

    @abstractmethod
    async def rollback(self):
        """Discard pending changes"""

    @abstractmethod
    async def close(self):
        """Release the underlying connection"""


class SQLAlchemyUnitOfWork(AbstractUnitOfWork):
    """
    Unit of Work over a fresh AsyncSession.

    Usage:
        async with SQLAlchemyUnitOfWork(database.session_maker) as uow:
            employee = await uow.employees.get_by_id(employee_id)
    """

    def __init__(self, session_factory: async_sessionmaker):
        self._session_factory = session_factory
        self._session: Optional[AsyncSession] = None

    async def __aenter__(self):
        # Deferred: the repository module imports the domain layer
        from app.repositories.employee_repository import EmployeeRepository

        self._session = self._session_factory()
        self.employees = EmployeeRepository(self._session)
        return await super().__aenter__()

    async def commit(self):
        try:
            await self._session.commit()
        except SQLAlchemyError as e:
            logger.error(f"❌ Commit failed: {e}")
            raise PersistenceError("Failed to commit employee changes") from e
        logger.debug("✅ Transaction committed")

    async def rollback(self):
        await self._session.rollback()
        logger.debug("↩️  Transaction rolled back")

    async def close(self):
        await self._session.close()
