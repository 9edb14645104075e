from __future__ import annotations

from abc import ABC, abstractmethod

from ...core.enums import Person
from ...state.model import AppState
from ..model import Summary


class SummaryCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def compute_summary(self, person: Person, month_id: str, state: AppState) -> Summary:
        raise NotImplementedError
