from __future__ import annotations

import logging

from ...common.datetime_utils import iter_month_days, months_between_inclusive
from ...core.constants import CALCULATION_UNIT_RATE, CALCULATIONS_PERSON
from ...core.enums import DayType, Person
from ...state.model import AppState, PersonMonthlyData, PersonSettings
from ..model import DayCounts, LeaveBalance, Summary
from .base import SummaryCalculator

logger = logging.getLogger(__name__)

# Python's date.weekday(): Monday == 0
FRIDAY = 4


class StandardSummaryCalculator(SummaryCalculator):
    """Standard rule.

    - leave days are paid at the daily rate, Friday work at the flat Friday rate
    - leave balances are folded over the whole history up to the target month
    """

    def compute_summary(self, person: Person, month_id: str, state: AppState) -> Summary:
        person = Person(person)
        settings = state.settings.for_person(person)
        data = state.person_month(month_id, person)

        counts = self.classify_month(month_id, data)
        work_days = counts.work
        friday_work_days = counts.friday_work
        vacation_days_used = counts.vacation
        sick_days_used = counts.sick

        daily_rate = self.daily_rate(settings)
        base_salary_earned = (work_days + vacation_days_used + sick_days_used) * daily_rate + friday_work_days * settings.friday_rate
        calculations_profit = data.calculations * CALCULATION_UNIT_RATE if person == CALCULATIONS_PERSON else 0
        total_salary = base_salary_earned + calculations_profit + data.bonus

        balance = self.leave_balance(person, month_id, state)

        logger.debug("summary person=%s month=%s total=%s", person.value, month_id, total_salary)
        return Summary(
            work_days=work_days,
            friday_work_days=friday_work_days,
            vacation_days_used=vacation_days_used,
            sick_days_used=sick_days_used,
            daily_rate=daily_rate,
            base_salary_earned=base_salary_earned,
            calculations_profit=calculations_profit,
            bonus=data.bonus,
            total_salary=total_salary,
            current_vacation=balance.vacation,
            current_sick=balance.sick,
        )

    @staticmethod
    def daily_rate(settings: PersonSettings) -> float:
        if not settings.monthly_work_days:
            return 0
        return settings.base_salary / settings.monthly_work_days

    @staticmethod
    def classify_month(month_id: str, data: PersonMonthlyData) -> DayCounts:
        """Count each day of the month by class.

        Keys of the stored mapping outside the month are never visited.
        """
        work = friday_work = vacation = sick = unmarked = 0
        for day in iter_month_days(month_id):
            day_type = data.day_type(day)
            if day_type == DayType.WORK:
                if day.weekday() == FRIDAY:
                    friday_work += 1
                else:
                    work += 1
            elif day_type == DayType.VACATION:
                vacation += 1
            elif day_type == DayType.SICK:
                sick += 1
            else:
                unmarked += 1
        return DayCounts(work=work, friday_work=friday_work, vacation=vacation, sick=sick, unmarked=unmarked)

    def leave_balance(self, person: Person, month_id: str, state: AppState) -> LeaveBalance:
        settings = state.settings.for_person(person)
        vacation = settings.vacation_days_initial
        sick = settings.sick_days_initial

        # Baseline is the earliest month recorded for anyone, not per person.
        all_months = state.recorded_months()
        if not all_months or month_id < all_months[0]:
            return LeaveBalance(
                vacation=vacation + settings.vacation_days_accrual,
                sick=sick + settings.sick_days_accrual,
            )

        diff_months = months_between_inclusive(all_months[0], month_id)
        vacation += diff_months * settings.vacation_days_accrual
        sick += diff_months * settings.sick_days_accrual

        for m in all_months:
            if m > month_id:
                continue
            counts = self.classify_month(m, state.person_month(m, person))
            vacation -= counts.vacation
            sick -= counts.sick

        return LeaveBalance(vacation=vacation, sick=sick)
