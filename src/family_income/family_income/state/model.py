from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from types import MappingProxyType
from typing import Any, Mapping, Optional

from ..common.validators import (
    require_day_type,
    require_iso_date,
    require_month_id,
    require_non_negative,
    require_non_negative_int,
    require_number,
    require_positive,
)
from ..core import constants
from ..core.enums import DayType, Person
from ..core.exceptions import ValidationError


def _frozen(mapping: Mapping) -> Mapping:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class PersonSettings:
    """Fixed pay and leave configuration for one person."""

    base_salary: float
    monthly_work_days: float
    friday_rate: float
    vacation_days_initial: float
    sick_days_initial: float
    vacation_days_accrual: float
    sick_days_accrual: float

    @classmethod
    def default(cls) -> "PersonSettings":
        return cls(
            base_salary=constants.DEFAULT_BASE_SALARY,
            monthly_work_days=constants.DEFAULT_MONTHLY_WORK_DAYS,
            friday_rate=constants.DEFAULT_FRIDAY_RATE,
            vacation_days_initial=constants.DEFAULT_VACATION_DAYS_INITIAL,
            sick_days_initial=constants.DEFAULT_SICK_DAYS_INITIAL,
            vacation_days_accrual=constants.DEFAULT_VACATION_DAYS_ACCRUAL,
            sick_days_accrual=constants.DEFAULT_SICK_DAYS_ACCRUAL,
        )

    def validate(self) -> "PersonSettings":
        require_non_negative(self.base_salary, "baseSalary")
        require_positive(self.monthly_work_days, "monthlyWorkDays")
        require_non_negative(self.friday_rate, "fridayRate")
        require_number(self.vacation_days_initial, "vacationDaysInitial")
        require_number(self.sick_days_initial, "sickDaysInitial")
        require_non_negative(self.vacation_days_accrual, "vacationDaysAccrual")
        require_non_negative(self.sick_days_accrual, "sickDaysAccrual")
        return self

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PersonSettings":
        try:
            return cls(
                base_salary=data["baseSalary"],
                monthly_work_days=data["monthlyWorkDays"],
                friday_rate=data["fridayRate"],
                vacation_days_initial=data["vacationDaysInitial"],
                sick_days_initial=data["sickDaysInitial"],
                vacation_days_accrual=data["vacationDaysAccrual"],
                sick_days_accrual=data["sickDaysAccrual"],
            ).validate()
        except KeyError as e:
            raise ValidationError(f"Missing setting: {e.args[0]}") from e
        except TypeError as e:
            raise ValidationError("Person settings must be an object") from e

    def to_dict(self) -> dict:
        return {
            "baseSalary": self.base_salary,
            "monthlyWorkDays": self.monthly_work_days,
            "fridayRate": self.friday_rate,
            "vacationDaysInitial": self.vacation_days_initial,
            "sickDaysInitial": self.sick_days_initial,
            "vacationDaysAccrual": self.vacation_days_accrual,
            "sickDaysAccrual": self.sick_days_accrual,
        }


@dataclass(frozen=True)
class Settings:
    nachman: PersonSettings
    mint: PersonSettings

    @classmethod
    def default(cls) -> "Settings":
        return cls(nachman=PersonSettings.default(), mint=PersonSettings.default())

    def for_person(self, person: Person) -> PersonSettings:
        return getattr(self, Person(person).value)

    def with_person(self, person: Person, person_settings: PersonSettings) -> "Settings":
        return replace(self, **{Person(person).value: person_settings})

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Settings":
        if not isinstance(data, Mapping):
            raise ValidationError("settings must be an object")
        missing = [p.value for p in Person if p.value not in data]
        if missing:
            raise ValidationError(f"Missing settings for: {', '.join(missing)}")
        return cls(**{p.value: PersonSettings.from_dict(data[p.value]) for p in Person})

    def to_dict(self) -> dict:
        return {p.value: self.for_person(p).to_dict() for p in Person}


@dataclass(frozen=True)
class PersonMonthlyData:
    """One person's attendance for one month.

    `days` maps ISO dates to WORK/VACATION/SICK; unmarked days are absent.
    `calculations` is only paid for the calculations person.
    """

    days: Mapping[str, DayType] = field(default_factory=lambda: _frozen({}))
    calculations: int = 0
    bonus: float = 0

    def __post_init__(self):
        object.__setattr__(self, "days", _frozen({k: DayType(v) for k, v in self.days.items()}))

    @classmethod
    def empty(cls) -> "PersonMonthlyData":
        return cls()

    def day_type(self, day: date) -> DayType:
        return self.days.get(day.isoformat(), DayType.NONE)

    def with_day(self, iso_date: str, day_type: DayType) -> "PersonMonthlyData":
        days = dict(self.days)
        if day_type == DayType.NONE:
            days.pop(iso_date, None)
        else:
            days[iso_date] = day_type
        return replace(self, days=_frozen(days))

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]], *, month_id: str) -> "PersonMonthlyData":
        if data is None:
            return cls.empty()
        if not isinstance(data, Mapping):
            raise ValidationError("monthly person data must be an object")

        raw_days = data.get("days") or {}
        if not isinstance(raw_days, Mapping):
            raise ValidationError("days must be an object")

        days: dict[str, DayType] = {}
        for iso_date, raw_type in raw_days.items():
            day = require_iso_date(iso_date)
            if day.strftime(constants.MONTH_ID_FORMAT) != month_id:
                raise ValidationError(f"Date {iso_date} does not belong to month {month_id}")
            day_type = require_day_type(raw_type)
            if day_type != DayType.NONE:
                days[iso_date] = day_type

        return cls(
            days=days,
            calculations=require_non_negative_int(data.get("calculations", 0) or 0, "calculations"),
            bonus=require_number(data.get("bonus", 0) or 0, "bonus"),
        )

    def to_dict(self) -> dict:
        return {
            "days": {k: v.value for k, v in sorted(self.days.items())},
            "calculations": self.calculations,
            "bonus": self.bonus,
        }


@dataclass(frozen=True)
class MonthlyData:
    month_id: str
    nachman: PersonMonthlyData = field(default_factory=PersonMonthlyData.empty)
    mint: PersonMonthlyData = field(default_factory=PersonMonthlyData.empty)

    @classmethod
    def empty(cls, month_id: str) -> "MonthlyData":
        return cls(month_id=month_id)

    def for_person(self, person: Person) -> PersonMonthlyData:
        return getattr(self, Person(person).value)

    def with_person(self, person: Person, data: PersonMonthlyData) -> "MonthlyData":
        return replace(self, **{Person(person).value: data})

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], *, month_id: Optional[str] = None) -> "MonthlyData":
        if not isinstance(data, Mapping):
            raise ValidationError("monthly data must be an object")
        month_id = require_month_id(month_id or data.get("monthId"))
        if data.get("monthId") not in (None, month_id):
            raise ValidationError(f"monthId {data.get('monthId')!r} does not match key {month_id!r}")
        return cls(
            month_id=month_id,
            **{p.value: PersonMonthlyData.from_dict(data.get(p.value), month_id=month_id) for p in Person},
        )

    def to_dict(self) -> dict:
        out: dict[str, Any] = {"monthId": self.month_id}
        for p in Person:
            out[p.value] = self.for_person(p).to_dict()
        return out


@dataclass(frozen=True)
class AppState:
    """The whole persisted aggregate: settings plus every recorded month.

    Immutable by convention; editors build a new AppState and hand it to the
    store as a whole-object replacement.
    """

    settings: Settings = field(default_factory=Settings.default)
    monthly_data: Mapping[str, MonthlyData] = field(default_factory=lambda: _frozen({}))

    def __post_init__(self):
        if not isinstance(self.monthly_data, MappingProxyType):
            object.__setattr__(self, "monthly_data", _frozen(self.monthly_data))

    @classmethod
    def default(cls) -> "AppState":
        return cls()

    def recorded_months(self) -> list[str]:
        """Month ids with a stored record, oldest first."""
        return sorted(self.monthly_data)

    def month(self, month_id: str) -> MonthlyData:
        return self.monthly_data.get(month_id) or MonthlyData.empty(month_id)

    def person_month(self, month_id: str, person: Person) -> PersonMonthlyData:
        record = self.monthly_data.get(month_id)
        if record is None:
            return PersonMonthlyData.empty()
        return record.for_person(person)

    def with_settings(self, settings: Settings) -> "AppState":
        return replace(self, settings=settings)

    def with_month(self, monthly: MonthlyData) -> "AppState":
        months = dict(self.monthly_data)
        months[monthly.month_id] = monthly
        return replace(self, monthly_data=_frozen(months))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AppState":
        if not isinstance(data, Mapping) or "settings" not in data or "monthlyData" not in data:
            raise ValidationError("State must contain 'settings' and 'monthlyData'")
        raw_months = data["monthlyData"]
        if not isinstance(raw_months, Mapping):
            raise ValidationError("monthlyData must be an object")
        return cls(
            settings=Settings.from_dict(data["settings"]),
            monthly_data={k: MonthlyData.from_dict(v, month_id=k) for k, v in raw_months.items()},
        )

    def to_dict(self) -> dict:
        return {
            "settings": self.settings.to_dict(),
            "monthlyData": {k: self.monthly_data[k].to_dict() for k in self.recorded_months()},
        }
