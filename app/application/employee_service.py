"""
Employee Service - Business logic orchestration for employee operations.

This service provides a unified interface for:
- Creating employees (shape check + registration uniqueness + persistence)
- Partial updates that always go through the aggregate's validation
- Salary increases
- Listing, fetching and deleting employees

All operations run inside a Unit of Work supplied by the caller
(HTTP endpoint or CLI command).
"""

from typing import Any, List, Mapping
from decimal import Decimal
import logging

from app.domain.unit_of_work import AbstractUnitOfWork
from app.domain.entities import Employee, CREATE_FIELDS
from app.domain.exceptions import (
    DuplicateRegistrationError,
    EmployeeNotFoundError,
    InvalidEmployeeDataError,
)
from app.domain.value_objects import Number

logger = logging.getLogger(__name__)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def validate_create_payload(data: Any) -> None:
    """
    Check the raw shape of a create request before domain validation.

    Raises:
        InvalidEmployeeDataError: If a field is missing or has the wrong type
    """
    valid = (
        isinstance(data, Mapping)
        and isinstance(data.get("name"), str)
        and isinstance(data.get("job_role"), str)
        and _is_number(data.get("salary"))
        and _is_number(data.get("employee_registration"))
        and bool(data["name"].strip())
        and bool(data["job_role"].strip())
    )
    if not valid:
        raise InvalidEmployeeDataError(
            "Invalid employee data. Required fields: " + ", ".join(CREATE_FIELDS)
        )


class EmployeeService:
    """
    Application service for employee operations.

    Orchestrates:
    - Domain logic (validation, business rules)
    - Infrastructure (persistence via the repository port)
    - Cross-cutting concerns (logging)
    """

    async def list_employees(self, uow: AbstractUnitOfWork) -> List[Employee]:
        return await uow.employees.get_all()

    async def get_employee(self, uow: AbstractUnitOfWork, employee_id: str) -> Employee:
        """
        Raises:
            EmployeeNotFoundError: If employee doesn't exist
        """
        employee = await uow.employees.get_by_id(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(employee_id)
        return employee

    async def create_employee(
        self,
        uow: AbstractUnitOfWork,
        data: Mapping[str, Any]
    ) -> Employee:
        """
        Create a new employee.

        The registration check below is not atomic with the insert; the
        repository's unique constraint rejects a concurrent duplicate with
        the same DuplicateRegistrationError.

        Args:
            uow: Unit of Work for transaction
            data: name, job_role, salary, employee_registration

        Returns:
            Stored employee with its assigned id

        Raises:
            InvalidEmployeeDataError: If the payload shape is wrong
            DuplicateRegistrationError: If registration is already taken
            ValidationError: If a field violates a domain rule
        """
        # 1. Validate input shape
        validate_create_payload(data)

        # 2. Check registration uniqueness
        registration = data["employee_registration"]
        existing = await uow.employees.get_by_registration(registration)
        if existing is not None:
            logger.warning(f"Duplicate registration rejected: {registration}")
            raise DuplicateRegistrationError(registration)

        # 3. Build the aggregate (domain validation)
        employee = Employee.create(data)

        # 4. Persist
        created = await uow.employees.create(employee)
        logger.info(f"👤 Created employee {created.id} ({created.name})")
        return created

    async def update_employee(
        self,
        uow: AbstractUnitOfWork,
        employee_id: str,
        changes: Mapping[str, Any]
    ) -> Employee:
        """
        Apply a partial update (name, job_role, salary).

        Raises:
            EmployeeNotFoundError: If employee doesn't exist
            InvalidRegistrationError: If changes include employee_registration
            ValidationError: If a field violates a domain rule
        """
        # The repository loads the aggregate and applies the changes through it
        updated = await uow.employees.update(employee_id, changes)
        logger.info(f"✏️  Updated employee {employee_id}")
        return updated

    async def give_salary_increase(
        self,
        uow: AbstractUnitOfWork,
        employee_id: str,
        percentage: Number
    ) -> Employee:
        """
        Raise an employee's salary by a percentage in (0, 100].

        Raises:
            EmployeeNotFoundError: If employee doesn't exist
            InvalidPercentageError: If percentage is out of range
        """
        employee = await self.get_employee(uow, employee_id)
        previous = employee.salary
        employee.give_salary_increase(percentage)

        updated = await uow.employees.update(
            employee_id, {"salary": employee.salary.amount}
        )
        logger.info(
            f"💰 Salary increase of {percentage}% for employee {employee_id}: "
            f"{previous} → {updated.salary}"
        )
        return updated

    async def delete_employee(self, uow: AbstractUnitOfWork, employee_id: str) -> None:
        """
        Raises:
            EmployeeNotFoundError: If employee doesn't exist
        """
        await uow.employees.delete(employee_id)
        logger.info(f"🗑️  Employee {employee_id} removed")
