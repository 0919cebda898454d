"""
Tests for Salary and EmployeeRegistration value objects.
"""
from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from app.domain.exceptions import (
    ErrorKind,
    InvalidAdjustmentError,
    InvalidPercentageError,
    InvalidRegistrationError,
    InvalidSalaryError,
)
from app.domain.value_objects import EmployeeRegistration, Salary


# ============================================
# Salary
# ============================================

class TestSalaryConstruction:

    def test_accepts_integer_and_cents(self):
        assert Salary(5000).amount == Decimal("5000")
        assert Salary(4250.5).amount == Decimal("4250.5")
        assert Salary(Decimal("1999.99")).amount == Decimal("1999.99")

    def test_zero_rejected(self):
        with pytest.raises(InvalidSalaryError) as exc_info:
            Salary(0)
        assert exc_info.value.message == "Salary cannot be zero"
        assert exc_info.value.kind == ErrorKind.INVALID_SALARY

    def test_negative_rejected(self):
        with pytest.raises(InvalidSalaryError, match="Salary cannot be negative"):
            Salary(-10)

    def test_more_than_two_decimal_places_rejected(self):
        with pytest.raises(InvalidSalaryError, match="maximum of 2 decimal places"):
            Salary(100.123)

    def test_trailing_zeros_do_not_count_as_precision(self):
        assert Salary(Decimal("100.500")).amount == Decimal("100.5")

    @pytest.mark.parametrize("value", [True, "1000", None, float("nan"), float("inf")])
    def test_non_numeric_rejected(self, value):
        with pytest.raises(InvalidSalaryError):
            Salary(value)

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            Salary(0)

    def test_immutable(self):
        salary = Salary(100)
        with pytest.raises(FrozenInstanceError):
            salary.amount = Decimal("200")

    def test_equality_is_numeric(self):
        assert Salary(100) == Salary(Decimal("100.00"))
        assert Salary(100) == Salary(100.0)
        assert Salary(100) != Salary(101)
        assert hash(Salary(100)) == hash(Salary(Decimal("100.00")))

    def test_to_json_is_plain_number(self):
        assert Salary(Decimal("1234.56")).to_json() == 1234.56
        assert isinstance(Salary(100).to_json(), float)


class TestSalaryAdjustments:

    def test_add_amount_returns_new_instance(self):
        original = Salary(1000)
        raised = original.add_amount(250.5)

        assert raised.amount == Decimal("1250.5")
        assert original.amount == Decimal("1000")

    def test_add_amount_validates_adjustment_like_a_salary(self):
        with pytest.raises(InvalidSalaryError, match="Salary cannot be zero"):
            Salary(1000).add_amount(0)
        with pytest.raises(InvalidSalaryError, match="Salary cannot be negative"):
            Salary(1000).add_amount(-5)

    def test_subtract_amount(self):
        assert Salary(1000).subtract_amount(200).amount == Decimal("800")

    def test_subtract_negative_adjustment_rejected(self):
        with pytest.raises(InvalidAdjustmentError, match="Adjustment cannot be negative"):
            Salary(1000).subtract_amount(-1)

    def test_subtract_too_precise_adjustment_rejected(self):
        with pytest.raises(InvalidAdjustmentError, match="maximum of 2 decimal places"):
            Salary(1000).subtract_amount(0.001)

    def test_subtract_below_zero_rejected(self):
        with pytest.raises(InvalidSalaryError, match="Salary cannot be negative"):
            Salary(100).subtract_amount(150)

    def test_subtract_to_exactly_zero_rejected(self):
        with pytest.raises(InvalidSalaryError, match="Salary cannot be zero"):
            Salary(100).subtract_amount(100)


class TestSalaryPercentageIncrease:

    def test_ten_percent(self):
        assert Salary(100).increase_by_percentage(10).amount == 110

    def test_full_hundred_percent_allowed(self):
        assert Salary(100).increase_by_percentage(100).amount == 200

    def test_result_rounded_to_cents(self):
        # 1234.56 * 1.07 = 1320.9792
        assert Salary(Decimal("1234.56")).increase_by_percentage(7).amount == Decimal("1320.98")

    def test_original_unchanged(self):
        original = Salary(100)
        original.increase_by_percentage(10)
        assert original.amount == 100

    @pytest.mark.parametrize("percentage", [0, -5, 101, 100.01])
    def test_out_of_range_rejected(self, percentage):
        with pytest.raises(InvalidPercentageError) as exc_info:
            Salary(100).increase_by_percentage(percentage)
        assert exc_info.value.kind == ErrorKind.INVALID_PERCENTAGE

    def test_messages(self):
        with pytest.raises(InvalidPercentageError, match="Percentage must be greater than zero"):
            Salary(100).increase_by_percentage(0)
        with pytest.raises(InvalidPercentageError, match="Percentage cannot be greater than 100"):
            Salary(100).increase_by_percentage(101)


# ============================================
# EmployeeRegistration
# ============================================

class TestEmployeeRegistration:

    @pytest.mark.parametrize("value", [100000, 123456, 999999])
    def test_six_digits_accepted(self, value):
        assert EmployeeRegistration(value).value == value

    @pytest.mark.parametrize("value", [12345, 99999, 1234567])
    def test_wrong_digit_count_rejected(self, value):
        with pytest.raises(InvalidRegistrationError, match="exactly 6 digits"):
            EmployeeRegistration(value)

    @pytest.mark.parametrize("value", [0, -123456])
    def test_non_positive_rejected(self, value):
        with pytest.raises(InvalidRegistrationError, match="greater than 0"):
            EmployeeRegistration(value)

    @pytest.mark.parametrize("value", [123456.5, 123456.0, "123456", True, None])
    def test_non_integer_rejected(self, value):
        with pytest.raises(InvalidRegistrationError, match="integer number"):
            EmployeeRegistration(value)

    def test_value_equality(self):
        assert EmployeeRegistration(123456) == EmployeeRegistration(123456)
        assert EmployeeRegistration(123456) != EmployeeRegistration(654321)

    def test_immutable(self):
        registration = EmployeeRegistration(123456)
        with pytest.raises(FrozenInstanceError):
            registration.value = 654321

    def test_to_json(self):
        assert EmployeeRegistration(123456).to_json() == 123456
