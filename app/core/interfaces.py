"""
Core interfaces for the employee management service.

The repository port is consumed by the application layer and implemented
by a persistence adapter (see app/repositories/employee_repository.py).
"""
from abc import ABC, abstractmethod
from typing import Any, List, Mapping, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain.entities import Employee


class IEmployeeRepository(ABC):
    """
    Interface for employee storage and retrieval.

    Implementations must handle:
    - Identity assignment on create
    - Registration uniqueness (a conflicting insert is a hard error)
    - Converting storage rows back into valid Employee aggregates
    """

    @abstractmethod
    async def get_all(self) -> List['Employee']:
        """
        Get all employees.

        Returns:
            Employees ordered by creation time (oldest first)
        """
        pass

    @abstractmethod
    async def get_by_id(self, employee_id: str) -> Optional['Employee']:
        """
        Get employee by ID.

        Args:
            employee_id: Employee identifier

        Returns:
            Employee if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_registration(self, registration: int) -> Optional['Employee']:
        """
        Get employee by registration number.

        Args:
            registration: 6-digit registration number

        Returns:
            Employee if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, employee: 'Employee') -> 'Employee':
        """
        Persist a new employee and assign its identity.

        Args:
            employee: Validated Employee aggregate (id is ignored)

        Returns:
            Stored employee with its assigned id

        Raises:
            DuplicateRegistrationError: If the registration is already taken
            PersistenceError: If storage fails
        """
        pass

    @abstractmethod
    async def update(self, employee_id: str, changes: Mapping[str, Any]) -> 'Employee':
        """
        Apply a partial update (name, job_role, salary) to a stored employee.

        Args:
            employee_id: Employee identifier
            changes: Fields to change

        Returns:
            Updated employee

        Raises:
            EmployeeNotFoundError: If employee doesn't exist
            InvalidRegistrationError: If changes include employee_registration
            ValidationError: If a field violates its rule
        """
        pass

    @abstractmethod
    async def delete(self, employee_id: str) -> None:
        """
        Delete an employee.

        Raises:
            EmployeeNotFoundError: If employee doesn't exist
        """
        pass
