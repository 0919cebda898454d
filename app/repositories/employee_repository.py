"""
Employee Repository implementation using SQLAlchemy.

Handles conversion between:
- Domain aggregate (Employee) → ORM model (EmployeeModel)
- ORM model → Domain aggregate

Registration uniqueness is backed by the employees table's unique
constraint; a violating insert surfaces as DuplicateRegistrationError.
"""

from datetime import timezone
from typing import Any, List, Mapping, Optional
import logging
import uuid

from sqlalchemy import select
from sqlalchemy.exc import DataError, IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.interfaces import IEmployeeRepository
from app.db.models import EmployeeModel
from app.domain.entities import Employee
from app.domain.exceptions import (
    DuplicateRegistrationError,
    EmployeeNotFoundError,
    InvalidEmployeeDataError,
    PersistenceError,
)

logger = logging.getLogger(__name__)

# Values the domain accepts but the columns cannot hold (e.g. salary past Numeric(12, 2))
STORAGE_LIMIT_MESSAGE = "Employee data exceeds storage limits"


class EmployeeRepository(IEmployeeRepository):
    """SQLAlchemy implementation of IEmployeeRepository."""

    def __init__(self, db_session: AsyncSession):
        """
        Initialize repository with database session.

        Args:
            db_session: SQLAlchemy async session
        """
        self._db = db_session

    async def get_all(self) -> List[Employee]:
        try:
            result = await self._db.execute(
                select(EmployeeModel).order_by(EmployeeModel.created_at, EmployeeModel.id)
            )
            employees = [self._from_orm(row) for row in result.scalars().all()]
        except SQLAlchemyError as e:
            logger.error(f"Failed to list employees: {e}")
            raise PersistenceError("Failed to list employees") from e

        logger.debug(f"📖 Retrieved {len(employees)} employee(s)")
        return employees

    async def get_by_id(self, employee_id: str) -> Optional[Employee]:
        db_employee = await self._get_model(employee_id)
        if db_employee is None:
            return None
        return self._from_orm(db_employee)

    async def get_by_registration(self, registration: int) -> Optional[Employee]:
        try:
            result = await self._db.execute(
                select(EmployeeModel).where(EmployeeModel.employee_registration == registration)
            )
            db_employee = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Failed to get employee by registration {registration}: {e}")
            raise PersistenceError("Failed to look up employee registration") from e

        if db_employee is None:
            return None
        return self._from_orm(db_employee)

    async def create(self, employee: Employee) -> Employee:
        """
        Insert a new employee row and assign its id.

        Raises:
            DuplicateRegistrationError: If registration already exists
            InvalidEmployeeDataError: If a value does not fit its column
            PersistenceError: If storage fails
        """
        db_employee = self._to_orm(employee)
        db_employee.id = uuid.uuid4().hex

        try:
            self._db.add(db_employee)
            await self._db.flush()
        except IntegrityError as e:
            logger.warning(
                f"Registration {employee.employee_registration} rejected by unique constraint"
            )
            raise DuplicateRegistrationError(employee.employee_registration.value) from e
        except DataError as e:
            logger.warning(f"Employee rejected by column limits: {e}")
            raise InvalidEmployeeDataError(STORAGE_LIMIT_MESSAGE) from e
        except SQLAlchemyError as e:
            logger.error(f"Failed to create employee: {e}")
            raise PersistenceError("Failed to create employee") from e

        logger.info(
            f"💾 Saved employee {db_employee.id} "
            f"(registration {employee.employee_registration})"
        )
        return self._from_orm(db_employee)

    async def update(self, employee_id: str, changes: Mapping[str, Any]) -> Employee:
        """
        Apply changes through the aggregate, then write them back.

        Raises:
            EmployeeNotFoundError: If employee doesn't exist
            ValidationError: If changes are rejected by the aggregate
        """
        db_employee = await self._get_model(employee_id)
        if db_employee is None:
            raise EmployeeNotFoundError(employee_id)

        employee = self._from_orm(db_employee)
        employee.apply_update(changes)

        db_employee.name = employee.name
        db_employee.job_role = employee.job_role
        db_employee.salary = employee.salary.amount
        db_employee.updated_at = employee.updated_at

        try:
            await self._db.flush()
        except DataError as e:
            logger.warning(f"Update of employee {employee_id} rejected by column limits: {e}")
            raise InvalidEmployeeDataError(STORAGE_LIMIT_MESSAGE) from e
        except SQLAlchemyError as e:
            logger.error(f"Failed to update employee {employee_id}: {e}")
            raise PersistenceError("Failed to update employee") from e

        logger.info(f"💾 Updated employee {employee_id} ({', '.join(sorted(changes))})")
        return employee

    async def delete(self, employee_id: str) -> None:
        db_employee = await self._get_model(employee_id)
        if db_employee is None:
            raise EmployeeNotFoundError(employee_id)

        try:
            await self._db.delete(db_employee)
            await self._db.flush()
        except SQLAlchemyError as e:
            logger.error(f"Failed to delete employee {employee_id}: {e}")
            raise PersistenceError("Failed to delete employee") from e

        logger.info(f"🗑️  Deleted employee {employee_id}")

    async def _get_model(self, employee_id: str) -> Optional[EmployeeModel]:
        try:
            result = await self._db.execute(
                select(EmployeeModel).where(EmployeeModel.id == employee_id)
            )
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Failed to retrieve employee {employee_id}: {e}")
            raise PersistenceError("Failed to retrieve employee") from e

    # Domain ↔ ORM conversion methods

    def _to_orm(self, employee: Employee) -> EmployeeModel:
        """Convert domain Employee → ORM EmployeeModel"""
        return EmployeeModel(
            id=employee.id,
            name=employee.name,
            job_role=employee.job_role,
            salary=employee.salary.amount,
            employee_registration=employee.employee_registration.value,
            created_at=employee.created_at,
            updated_at=employee.updated_at,
        )

    def _from_orm(self, db_employee: EmployeeModel) -> Employee:
        """Convert ORM EmployeeModel → domain Employee"""
        return Employee(
            id=db_employee.id,
            name=db_employee.name,
            job_role=db_employee.job_role,
            salary=db_employee.salary,
            employee_registration=db_employee.employee_registration,
            created_at=_as_utc(db_employee.created_at),
            updated_at=_as_utc(db_employee.updated_at),
        )


def _as_utc(value):
    # SQLite drops tzinfo on the way back
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
