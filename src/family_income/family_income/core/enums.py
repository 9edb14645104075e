from __future__ import annotations

from enum import Enum


class Person(str, Enum):
    """The two people whose income is tracked."""

    NACHMAN = "nachman"
    MINT = "mint"


class DayType(str, Enum):
    """Classification of a single calendar day.

    NONE is never stored; an unmarked day is simply absent from the mapping.
    """

    WORK = "work"
    VACATION = "vacation"
    SICK = "sick"
    NONE = "none"
