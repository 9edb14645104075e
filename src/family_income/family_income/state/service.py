from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date

from ..common.datetime_utils import month_id_of
from ..common.validators import (
    require_day_type,
    require_iso_date,
    require_month_id,
    require_non_negative_int,
    require_number,
    require_person,
)
from ..core.enums import DayType, Person
from ..core.exceptions import ValidationError
from .model import AppState, MonthlyData, PersonSettings, Settings
from .repository import StateRepository

logger = logging.getLogger(__name__)


class StateService:
    """The state store.

    Every edit builds a new AppState and saves it wholesale, so a reader never
    sees a half-written month.
    """

    def __init__(self, repository: StateRepository):
        self._repository = repository

    def get_state(self) -> AppState:
        return self._repository.load() or AppState.default()

    def _commit(self, state: AppState) -> AppState:
        self._repository.save(state)
        return state

    def update_settings(self, settings: Settings) -> AppState:
        for p in Person:
            settings.for_person(p).validate()
        logger.info("Settings updated")
        return self._commit(self.get_state().with_settings(settings))

    def update_person_settings(self, person: Person | str, person_settings: PersonSettings) -> AppState:
        person = require_person(person)
        person_settings.validate()
        state = self.get_state()
        logger.info("Settings updated for %s", person.value)
        return self._commit(state.with_settings(state.settings.with_person(person, person_settings)))

    def update_month(self, month_id: str, monthly: MonthlyData) -> AppState:
        require_month_id(month_id)
        if monthly.month_id != month_id:
            raise ValidationError(f"Month record {monthly.month_id} cannot be stored under {month_id}")
        for p in Person:
            for iso_date in monthly.for_person(p).days:
                if month_id_of(require_iso_date(iso_date)) != month_id:
                    raise ValidationError(f"Date {iso_date} does not belong to month {month_id}")
        logger.info("Month %s replaced", month_id)
        return self._commit(self.get_state().with_month(monthly))

    def set_day(self, person: Person | str, iso_date: str, day_type: DayType | str) -> AppState:
        person = require_person(person)
        day: date = require_iso_date(iso_date)
        day_type = require_day_type(day_type)

        month_id = month_id_of(day)
        state = self.get_state()
        month = state.month(month_id)
        updated = month.with_person(person, month.for_person(person).with_day(day.isoformat(), day_type))
        logger.info("Day %s for %s set to %s", day.isoformat(), person.value, day_type.value)
        return self._commit(state.with_month(updated))

    def set_calculations(self, month_id: str, count: int, *, person: Person | str = Person.NACHMAN) -> AppState:
        person = require_person(person)
        require_month_id(month_id)
        count = require_non_negative_int(count, "calculations")

        state = self.get_state()
        month = state.month(month_id)
        data = month.for_person(person)
        updated = month.with_person(person, replace(data, calculations=count))
        logger.info("Calculations for %s in %s set to %s", person.value, month_id, count)
        return self._commit(state.with_month(updated))

    def set_bonus(self, person: Person | str, month_id: str, amount: float) -> AppState:
        person = require_person(person)
        require_month_id(month_id)
        amount = require_number(amount, "bonus")

        state = self.get_state()
        month = state.month(month_id)
        data = month.for_person(person)
        updated = month.with_person(person, replace(data, bonus=amount))
        logger.info("Bonus for %s in %s set to %s", person.value, month_id, amount)
        return self._commit(state.with_month(updated))

    def restore(self, state: AppState) -> AppState:
        logger.info("State restored (%d months)", len(state.monthly_data))
        return self._commit(state)

