from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class Summary:
    """Computed pay and leave figures for one person and one month.

    Values are not rounded; rounding is a display concern.
    """

    work_days: int
    friday_work_days: int
    vacation_days_used: int
    sick_days_used: int
    daily_rate: float
    base_salary_earned: float
    calculations_profit: float
    bonus: float
    total_salary: float
    current_vacation: float
    current_sick: float

    def to_dict(self) -> dict:
        data = asdict(self)
        return {
            "workDays": data["work_days"],
            "fridayWorkDays": data["friday_work_days"],
            "vacationDaysUsed": data["vacation_days_used"],
            "sickDaysUsed": data["sick_days_used"],
            "dailyRate": data["daily_rate"],
            "baseSalaryEarned": data["base_salary_earned"],
            "calculationsProfit": data["calculations_profit"],
            "bonus": data["bonus"],
            "totalSalary": data["total_salary"],
            "currentVacation": data["current_vacation"],
            "currentSick": data["current_sick"],
        }


@dataclass(frozen=True)
class LeaveBalance:
    vacation: float
    sick: float


@dataclass(frozen=True)
class DayCounts:
    """Days of one month by class; the fields sum to the month length."""

    work: int
    friday_work: int
    vacation: int
    sick: int
    unmarked: int

    @property
    def total(self) -> int:
        return self.work + self.friday_work + self.vacation + self.sick + self.unmarked
