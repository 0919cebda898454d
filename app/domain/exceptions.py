"""
Domain exceptions for the employee model.

Every error carries an ErrorKind so callers (HTTP layer, CLI) can branch on
the kind instead of matching message strings. Messages are field-attributable
and safe to show to API clients as-is.

Infrastructure failures are reported as PersistenceError, which is NOT a
DomainError - a broken database is not a business-rule violation.
"""

import enum


class ErrorKind(str, enum.Enum):
    """Discriminator for domain and persistence errors"""
    INVALID_NAME = "invalid_name"
    INVALID_JOB_ROLE = "invalid_job_role"
    INVALID_SALARY = "invalid_salary"
    INVALID_ADJUSTMENT = "invalid_adjustment"
    INVALID_PERCENTAGE = "invalid_percentage"
    INVALID_REGISTRATION = "invalid_registration"
    INVALID_EMPLOYEE_DATA = "invalid_employee_data"
    DUPLICATE_REGISTRATION = "duplicate_registration"
    NOT_FOUND = "not_found"
    PERSISTENCE_ERROR = "persistence_error"


class DomainError(Exception):
    """Base exception for domain layer errors"""

    kind: ErrorKind

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict:
        return {"error": self.message, "kind": self.kind.value}


class ValidationError(DomainError, ValueError):
    """Raised when a value violates a field rule"""
    pass


class InvalidNameError(ValidationError):
    kind = ErrorKind.INVALID_NAME


class InvalidJobRoleError(ValidationError):
    kind = ErrorKind.INVALID_JOB_ROLE


class InvalidSalaryError(ValidationError):
    kind = ErrorKind.INVALID_SALARY


class InvalidAdjustmentError(ValidationError):
    kind = ErrorKind.INVALID_ADJUSTMENT


class InvalidPercentageError(ValidationError):
    kind = ErrorKind.INVALID_PERCENTAGE


class InvalidRegistrationError(ValidationError):
    kind = ErrorKind.INVALID_REGISTRATION


class InvalidEmployeeDataError(ValidationError):
    """Raised when input is missing required fields or has unknown ones"""
    kind = ErrorKind.INVALID_EMPLOYEE_DATA


class DuplicateRegistrationError(DomainError):
    """Raised when another employee already holds the registration number"""

    kind = ErrorKind.DUPLICATE_REGISTRATION

    def __init__(self, registration: int):
        self.registration = registration
        super().__init__("Employee with this registration already exists")


class EmployeeNotFoundError(DomainError):
    """Raised when employee doesn't exist"""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, employee_id: str):
        self.employee_id = employee_id
        super().__init__(f"Employee {employee_id} not found")


class PersistenceError(Exception):
    """Raised by repository adapters when the storage layer fails"""

    kind = ErrorKind.PERSISTENCE_ERROR

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict:
        return {"error": self.message, "kind": self.kind.value}
