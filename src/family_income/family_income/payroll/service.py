from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.formatting import round_balance, round_money
from ..common.validators import require_month_id, require_person
from ..core.constants import CALCULATIONS_PERSON
from ..core.enums import Person
from ..state.model import AppState
from ..state.service import StateService
from .calculator.base import SummaryCalculator
from .calculator.standard_calculator import StandardSummaryCalculator
from .model import Summary


@dataclass(frozen=True)
class ReportData:
    month_id: str
    rows: list[dict]
    family_total: float

    def to_dict(self) -> dict:
        return {"monthId": self.month_id, "rows": self.rows, "familyTotal": self.family_total}


class PayrollReportService:
    def __init__(
        self,
        state: StateService,
        *,
        calculator: Optional[SummaryCalculator] = None,
    ):
        self._state = state
        self._calculator = calculator or StandardSummaryCalculator()

    def summary(self, person: Person | str, month_id: str, *, state: Optional[AppState] = None) -> Summary:
        person = require_person(person)
        require_month_id(month_id)
        return self._calculator.compute_summary(person, month_id, state or self._state.get_state())

    def build_monthly_report(self, month_id: str) -> ReportData:
        """Both people's figures for one month, rounded for display."""
        require_month_id(month_id)
        state = self._state.get_state()

        rows: list[dict] = []
        family_total = 0.0
        for person in Person:
            s = self._calculator.compute_summary(person, month_id, state)
            family_total += s.total_salary

            row = {
                "person": person.value,
                "workDays": s.work_days,
                "fridayWorkDays": s.friday_work_days,
                "vacationDaysUsed": s.vacation_days_used,
                "sickDaysUsed": s.sick_days_used,
                "currentVacation": round_balance(s.current_vacation),
                "currentSick": round_balance(s.current_sick),
                "baseSalaryEarned": round_money(s.base_salary_earned),
                "totalSalary": round_money(s.total_salary),
            }
            if person == CALCULATIONS_PERSON:
                row["calculationsProfit"] = round_money(s.calculations_profit)
            if s.bonus > 0:
                row["bonus"] = round_money(s.bonus)
            rows.append(row)

        return ReportData(month_id=month_id, rows=rows, family_total=round_money(family_total))
