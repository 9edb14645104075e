from __future__ import annotations

from dataclasses import replace
from typing import Optional

import pytest

from src.family_income.family_income.core.enums import DayType, Person
from src.family_income.family_income.core.exceptions import ValidationError
from src.family_income.family_income.state.model import AppState, MonthlyData, PersonMonthlyData, PersonSettings
from src.family_income.family_income.state.service import StateService


class InMemoryStateRepo:
    def __init__(self, state: Optional[AppState] = None):
        self._state = state
        self.saves = 0

    def load(self) -> Optional[AppState]:
        return self._state

    def save(self, state: AppState) -> None:
        self._state = state
        self.saves += 1


def test_empty_repository_yields_default_state():
    svc = StateService(InMemoryStateRepo())

    state = svc.get_state()

    assert state.settings.for_person(Person.MINT).base_salary == 10000
    assert state.settings.for_person(Person.NACHMAN).sick_days_accrual == 1.5
    assert dict(state.monthly_data) == {}


def test_set_day_creates_month_and_persists():
    repo = InMemoryStateRepo()
    svc = StateService(repo)

    svc.set_day(Person.MINT, "2024-03-12", DayType.VACATION)

    state = repo.load()
    assert state.recorded_months() == ["2024-03"]
    assert state.person_month("2024-03", Person.MINT).days["2024-03-12"] == DayType.VACATION
    assert dict(state.person_month("2024-03", Person.NACHMAN).days) == {}
    assert repo.saves == 1


def test_set_day_none_clears_entry():
    svc = StateService(InMemoryStateRepo())
    svc.set_day("nachman", "2024-03-12", "work")

    state = svc.set_day("nachman", "2024-03-12", "none")

    assert dict(state.person_month("2024-03", Person.NACHMAN).days) == {}


def test_edits_replace_instead_of_mutating():
    svc = StateService(InMemoryStateRepo())
    before = svc.set_day(Person.MINT, "2024-03-01", DayType.WORK)

    after = svc.set_bonus(Person.MINT, "2024-03", 300)

    assert before.person_month("2024-03", Person.MINT).bonus == 0
    assert after.person_month("2024-03", Person.MINT).bonus == 300
    assert after.person_month("2024-03", Person.MINT).days["2024-03-01"] == DayType.WORK


def test_set_calculations_rejects_negative():
    svc = StateService(InMemoryStateRepo())

    with pytest.raises(ValidationError):
        svc.set_calculations("2024-03", -1)


def test_set_calculations_keeps_days():
    svc = StateService(InMemoryStateRepo())
    svc.set_day(Person.NACHMAN, "2024-03-04", DayType.WORK)

    state = svc.set_calculations("2024-03", 6)

    data = state.person_month("2024-03", Person.NACHMAN)
    assert data.calculations == 6
    assert data.days["2024-03-04"] == DayType.WORK


def test_update_month_rejects_dates_from_other_month():
    svc = StateService(InMemoryStateRepo())
    monthly = MonthlyData(month_id="2024-03", mint=PersonMonthlyData(days={"2024-04-01": DayType.WORK}))

    with pytest.raises(ValidationError):
        svc.update_month("2024-03", monthly)


def test_update_month_rejects_mismatched_key():
    svc = StateService(InMemoryStateRepo())

    with pytest.raises(ValidationError):
        svc.update_month("2024-04", MonthlyData.empty("2024-03"))


def test_update_person_settings_only_touches_that_person():
    svc = StateService(InMemoryStateRepo())
    new = replace(PersonSettings.default(), base_salary=15000)

    state = svc.update_person_settings(Person.NACHMAN, new)

    assert state.settings.for_person(Person.NACHMAN).base_salary == 15000
    assert state.settings.for_person(Person.MINT).base_salary == 10000


def test_invalid_settings_are_not_saved():
    repo = InMemoryStateRepo()
    svc = StateService(repo)

    with pytest.raises(ValidationError):
        svc.update_person_settings(Person.MINT, replace(PersonSettings.default(), monthly_work_days=0))
    assert repo.saves == 0


def test_invalid_date_is_rejected():
    svc = StateService(InMemoryStateRepo())

    with pytest.raises(ValidationError):
        svc.set_day(Person.MINT, "2024-02-30", DayType.WORK)
