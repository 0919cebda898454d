"""
Value Objects for the employee model.

Value objects are immutable, self-validating, and enforce business rules.
Operations never mutate an instance - they return a new one:
- Salary: monetary amount (> 0, at most 2 decimal places)
- EmployeeRegistration: 6-digit business key for an employee
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Type, Union

from .exceptions import (
    InvalidAdjustmentError,
    InvalidPercentageError,
    InvalidRegistrationError,
    InvalidSalaryError,
    ValidationError,
)

Number = Union[int, float, Decimal]

CENTS = Decimal("0.01")
MAX_DECIMAL_PLACES = 2
REGISTRATION_DIGITS = 6


def _to_decimal(value: Number, error_cls: Type[ValidationError], label: str) -> Decimal:
    """Convert a numeric input to Decimal, rejecting bools and non-finite values"""
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise error_cls(f"{label} must be a number")

    # str() keeps the shortest repr of a float (1000.1 -> "1000.1", not the binary expansion)
    amount = value if isinstance(value, Decimal) else Decimal(str(value))
    if not amount.is_finite():
        raise error_cls(f"{label} must be a finite number")
    return amount


def _decimal_places(amount: Decimal) -> int:
    exponent = amount.normalize().as_tuple().exponent
    return max(0, -exponent)


def _validate_amount(amount: Decimal) -> None:
    if amount < 0:
        raise InvalidSalaryError("Salary cannot be negative")

    if amount == 0:
        raise InvalidSalaryError("Salary cannot be zero")

    if _decimal_places(amount) > MAX_DECIMAL_PLACES:
        raise InvalidSalaryError(
            f"Salary must have a maximum of {MAX_DECIMAL_PLACES} decimal places"
        )


@dataclass(frozen=True)
class Salary:
    """
    Salary value object.

    Format: positive Decimal with at most 2 decimal places
    Example: Salary(5000), Salary(Decimal("4250.50"))

    Equality is numeric: Salary(100) == Salary(Decimal("100.00")).
    """

    amount: Decimal

    def __post_init__(self):
        amount = _to_decimal(self.amount, InvalidSalaryError, "Salary")
        _validate_amount(amount)
        object.__setattr__(self, "amount", amount)

    def add_amount(self, adjustment: Number) -> "Salary":
        """
        Return a new Salary raised by a fixed amount.

        Raises:
            InvalidSalaryError: If adjustment is not a valid salary amount
        """
        adjustment = _to_decimal(adjustment, InvalidSalaryError, "Salary")
        _validate_amount(adjustment)
        return Salary(self.amount + adjustment)

    def subtract_amount(self, adjustment: Number) -> "Salary":
        """
        Return a new Salary lowered by a fixed amount.

        Raises:
            InvalidAdjustmentError: If adjustment is negative or too precise
            InvalidSalaryError: If the resulting salary would not be positive
        """
        adjustment = _to_decimal(adjustment, InvalidAdjustmentError, "Adjustment")
        if adjustment < 0:
            raise InvalidAdjustmentError("Adjustment cannot be negative")

        if _decimal_places(adjustment) > MAX_DECIMAL_PLACES:
            raise InvalidAdjustmentError(
                f"Adjustment must have a maximum of {MAX_DECIMAL_PLACES} decimal places"
            )

        new_amount = self.amount - adjustment
        if new_amount < 0:
            raise InvalidSalaryError("Salary cannot be negative")

        return Salary(new_amount)

    def increase_by_percentage(self, percentage: Number) -> "Salary":
        """
        Return a new Salary increased by a percentage in (0, 100].

        The result is rounded half-up to cents.

        Raises:
            InvalidPercentageError: If percentage is out of range
        """
        percentage = _to_decimal(percentage, InvalidPercentageError, "Percentage")
        if percentage <= 0:
            raise InvalidPercentageError("Percentage must be greater than zero")

        if percentage > 100:
            raise InvalidPercentageError("Percentage cannot be greater than 100")

        increase = self.amount * percentage / Decimal(100)
        return Salary((self.amount + increase).quantize(CENTS, rounding=ROUND_HALF_UP))

    def to_json(self) -> float:
        return float(self.amount)

    def __str__(self) -> str:
        return f"{self.amount:.2f}"

    def __repr__(self) -> str:
        return f"Salary('{self.amount}')"


@dataclass(frozen=True)
class EmployeeRegistration:
    """
    Employee registration number value object.

    Format: positive integer with exactly 6 digits
    Example: 123456

    Natural business key - unique across all employees and immutable
    once an employee is created.
    """

    value: int

    def __post_init__(self):
        value = self.value
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidRegistrationError("Employee registration must be an integer number")

        if value <= 0:
            raise InvalidRegistrationError(
                "Employee registration must be greater than 0 and not negative"
            )

        if not isinstance(value, int):
            raise InvalidRegistrationError("Employee registration must be an integer number")

        if len(str(value)) != REGISTRATION_DIGITS:
            raise InvalidRegistrationError(
                f"Employee registration must be exactly {REGISTRATION_DIGITS} digits"
            )

    def to_json(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"EmployeeRegistration({self.value})"
