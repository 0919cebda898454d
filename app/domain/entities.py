"""
Domain Entities - Rich business objects with identity and lifecycle.

Entities differ from value objects in that they have:
- Identity (tracked by ID, not by value)
- Mutable state (can change over time)
- Business logic (methods that enforce invariants)

The Employee entity is an aggregate root - it owns its Salary and
EmployeeRegistration value objects. State only changes through named
operations that validate before committing anything.
"""

import re
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from .exceptions import (
    InvalidEmployeeDataError,
    InvalidJobRoleError,
    InvalidNameError,
    InvalidRegistrationError,
)
from .value_objects import EmployeeRegistration, Number, Salary

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
JOB_ROLE_MIN_LENGTH = 2
JOB_ROLE_MAX_LENGTH = 50

# Letters (ASCII + Latin-1 accented, excluding × and ÷), space, apostrophe, hyphen
NAME_PATTERN = re.compile(r"^[A-Za-zÀ-ÖØ-öø-ÿ '-]+$")
JOB_ROLE_PATTERN = re.compile(r"^[A-Za-z0-9 -]+$")

CREATE_FIELDS = ("name", "job_role", "salary", "employee_registration")
UPDATABLE_FIELDS = frozenset({"name", "job_role", "salary"})


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def validate_name(name: Any) -> None:
    """
    Validate an employee name.

    Raises:
        InvalidNameError: If name is blank, too short/long, or has invalid characters
    """
    if not isinstance(name, str) or not name.strip():
        raise InvalidNameError("Employee name is required")

    trimmed = name.strip()
    if len(trimmed) < NAME_MIN_LENGTH:
        raise InvalidNameError(
            f"Employee name must be at least {NAME_MIN_LENGTH} characters long"
        )

    if len(trimmed) > NAME_MAX_LENGTH:
        raise InvalidNameError(
            f"Employee name cannot exceed {NAME_MAX_LENGTH} characters"
        )

    if not NAME_PATTERN.match(trimmed):
        raise InvalidNameError("Employee name contains invalid characters")


def validate_job_role(job_role: Any) -> None:
    """
    Validate a job role.

    Raises:
        InvalidJobRoleError: If job role is blank, too short/long, or has invalid characters
    """
    if not isinstance(job_role, str) or not job_role.strip():
        raise InvalidJobRoleError("Job role is required")

    trimmed = job_role.strip()
    if len(trimmed) < JOB_ROLE_MIN_LENGTH:
        raise InvalidJobRoleError(
            f"Job role must be at least {JOB_ROLE_MIN_LENGTH} characters long"
        )

    if len(trimmed) > JOB_ROLE_MAX_LENGTH:
        raise InvalidJobRoleError(
            f"Job role cannot exceed {JOB_ROLE_MAX_LENGTH} characters"
        )

    if not JOB_ROLE_PATTERN.match(trimmed):
        raise InvalidJobRoleError("Job role contains invalid characters")


class Employee:
    """
    Employee aggregate root.

    Invariants (business rules enforced by domain model):
    1. Name and job role always satisfy their length/character rules
    2. Salary is a valid Salary value object (positive, cents precision)
    3. Registration is a 6-digit EmployeeRegistration and never changes
    4. created_at never changes; updated_at moves on every successful mutation

    Every mutation validates first and only then assigns, so a rejected
    operation leaves the aggregate exactly as it was.
    """

    def __init__(
        self,
        id: Optional[str],
        name: str,
        job_role: str,
        salary: Number,
        employee_registration: int,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        # Order matters: name -> job role -> salary -> registration
        validate_name(name)
        validate_job_role(job_role)
        salary_vo = salary if isinstance(salary, Salary) else Salary(salary)
        registration_vo = (
            employee_registration
            if isinstance(employee_registration, EmployeeRegistration)
            else EmployeeRegistration(employee_registration)
        )

        now = _utcnow()
        self._id = id
        self._name = name
        self._job_role = job_role
        self._salary = salary_vo
        self._employee_registration = registration_vo
        self._created_at = created_at or now
        self._updated_at = updated_at or now

    @classmethod
    def create(cls, data: Mapping[str, Any]) -> "Employee":
        """
        Build a new, not-yet-persisted employee from raw input.

        Args:
            data: Mapping with name, job_role, salary, employee_registration

        Returns:
            Employee without an id (assigned by the repository)

        Raises:
            InvalidEmployeeDataError: If a required field is missing
            ValidationError: If any field violates its rule
        """
        missing = [field for field in CREATE_FIELDS if data.get(field) is None]
        if missing:
            raise InvalidEmployeeDataError(
                "Invalid employee data. Required fields: " + ", ".join(CREATE_FIELDS)
            )

        return cls(
            id=None,
            name=data["name"],
            job_role=data["job_role"],
            salary=data["salary"],
            employee_registration=data["employee_registration"],
        )

    # Read accessors

    @property
    def id(self) -> Optional[str]:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def job_role(self) -> str:
        return self._job_role

    @property
    def salary(self) -> Salary:
        return self._salary

    @property
    def employee_registration(self) -> EmployeeRegistration:
        return self._employee_registration

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    # Business logic methods

    def update_name(self, new_name: str) -> None:
        validate_name(new_name)
        self._name = new_name
        self._touch()

    def update_job_role(self, new_job_role: str) -> None:
        validate_job_role(new_job_role)
        self._job_role = new_job_role
        self._touch()

    def update_salary(self, new_amount: Number) -> None:
        self._salary = Salary(new_amount)
        self._touch()

    def give_salary_increase(self, percentage: Number) -> None:
        """
        Raise salary by a percentage.

        The previous Salary instance is left untouched; only the
        aggregate's reference is replaced.

        Raises:
            InvalidPercentageError: If percentage is not in (0, 100]
        """
        self._salary = self._salary.increase_by_percentage(percentage)
        self._touch()

    def apply_update(self, changes: Mapping[str, Any]) -> None:
        """
        Apply a partial update (name, job_role, salary).

        All supplied fields are validated before any of them is assigned,
        so a failure on one field leaves every field unchanged.

        Args:
            changes: Mapping with any subset of name, job_role, salary

        Raises:
            InvalidRegistrationError: If employee_registration is present
            InvalidEmployeeDataError: If an unknown field is present
            ValidationError: If a supplied field violates its rule
        """
        if "employee_registration" in changes:
            raise InvalidRegistrationError(
                "Employee registration cannot be changed after creation"
            )

        unknown = sorted(set(changes) - UPDATABLE_FIELDS)
        if unknown:
            raise InvalidEmployeeDataError(
                f"Unknown employee fields: {', '.join(unknown)}"
            )

        if "name" in changes:
            validate_name(changes["name"])
        if "job_role" in changes:
            validate_job_role(changes["job_role"])
        new_salary = Salary(changes["salary"]) if "salary" in changes else None

        if "name" in changes:
            self._name = changes["name"]
        if "job_role" in changes:
            self._job_role = changes["job_role"]
        if new_salary is not None:
            self._salary = new_salary
        self._touch()

    def _touch(self) -> None:
        self._updated_at = _utcnow()

    def to_dict(self) -> dict:
        """Serialize with salary and registration unwrapped to plain numbers"""
        return {
            "id": self._id,
            "name": self._name,
            "job_role": self._job_role,
            "salary": self._salary.to_json(),
            "employee_registration": self._employee_registration.to_json(),
            "created_at": self._created_at,
            "updated_at": self._updated_at,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Employee):
            return NotImplemented
        if self._id is None or other._id is None:
            return self is other
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id) if self._id is not None else id(self)

    def __repr__(self) -> str:
        return (
            f"Employee(id={self._id}, name={self._name!r}, "
            f"registration={self._employee_registration})"
        )
