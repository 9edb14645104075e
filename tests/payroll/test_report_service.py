from __future__ import annotations

from typing import Optional

from src.family_income.family_income.core.enums import DayType, Person
from src.family_income.family_income.payroll.service import PayrollReportService
from src.family_income.family_income.state.model import AppState
from src.family_income.family_income.state.service import StateService


class InMemoryStateRepo:
    def __init__(self, state: Optional[AppState] = None):
        self._state = state

    def load(self) -> Optional[AppState]:
        return self._state

    def save(self, state: AppState) -> None:
        self._state = state


def build_service() -> tuple[StateService, PayrollReportService]:
    state_service = StateService(InMemoryStateRepo())
    return state_service, PayrollReportService(state_service)


def test_report_has_a_row_per_person_and_family_total():
    state_service, svc = build_service()
    state_service.set_day(Person.NACHMAN, "2024-01-08", DayType.WORK)
    state_service.set_day(Person.MINT, "2024-01-09", DayType.WORK)
    state_service.set_day(Person.MINT, "2024-01-05", DayType.WORK)  # Friday
    state_service.set_calculations("2024-01", 3)

    report = svc.build_monthly_report("2024-01")

    nachman, mint = report.rows
    assert nachman["person"] == "nachman"
    assert nachman["calculationsProfit"] == 60
    assert nachman["totalSalary"] == 560
    assert "calculationsProfit" not in mint
    assert mint["totalSalary"] == 1000
    assert report.family_total == 1560


def test_report_rounds_for_display():
    state_service, svc = build_service()
    state_service.set_bonus(Person.MINT, "2024-01", 100)
    state_service.set_day(Person.MINT, "2024-01-02", DayType.SICK)
    state_service.set_day(Person.MINT, "2024-01-03", DayType.SICK)

    report = svc.build_monthly_report("2024-01")

    mint = report.rows[1]
    assert mint["currentSick"] == -0.5
    assert mint["bonus"] == 100
    assert "bonus" not in report.rows[0]


def test_summary_uses_current_state():
    state_service, svc = build_service()
    state_service.set_day("mint", "2024-02-12", "vacation")

    s = svc.summary("mint", "2024-02")

    assert s.vacation_days_used == 1
    assert s.current_vacation == 0


def test_report_json_uses_camel_case_like_summary():
    state_service, svc = build_service()
    state_service.set_day(Person.NACHMAN, "2024-01-08", DayType.WORK)

    report = svc.build_monthly_report("2024-01").to_dict()

    assert set(report) == {"monthId", "rows", "familyTotal"}
    summary_keys = set(svc.summary(Person.NACHMAN, "2024-01").to_dict())
    assert set(report["rows"][0]) - {"person"} <= summary_keys
