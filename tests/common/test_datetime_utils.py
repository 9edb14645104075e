from __future__ import annotations

from datetime import date

import pytest

from src.family_income.family_income.common.datetime_utils import iter_month_days, months_between_inclusive
from src.family_income.family_income.common.validators import require_month_id, require_number
from src.family_income.family_income.core.exceptions import ValidationError


def test_months_between_is_inclusive():
    assert months_between_inclusive("2024-01", "2024-03") == 3
    assert months_between_inclusive("2024-05", "2024-05") == 1


def test_months_between_crosses_year_boundary():
    assert months_between_inclusive("2023-11", "2024-02") == 4


def test_iter_month_days_handles_leap_february():
    days = list(iter_month_days("2024-02"))

    assert days[0] == date(2024, 2, 1)
    assert days[-1] == date(2024, 2, 29)
    assert len(list(iter_month_days("2023-02"))) == 28


@pytest.mark.parametrize("value", ["2024-1", "2024/01", "2024-00", "", None])
def test_require_month_id_rejects_malformed(value):
    with pytest.raises(ValidationError):
        require_month_id(value)


def test_require_number_rejects_integer_too_large_for_float():
    with pytest.raises(ValidationError):
        require_number(10**400, "bonus")


@pytest.mark.parametrize("value", [float("nan"), float("inf"), True, "5"])
def test_require_number_rejects_non_finite_and_non_numbers(value):
    with pytest.raises(ValidationError):
        require_number(value, "bonus")
