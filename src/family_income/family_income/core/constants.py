"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from .enums import Person

# Only this person is paid for calculation units.
CALCULATIONS_PERSON = Person.NACHMAN
CALCULATION_UNIT_RATE = 20

MONTH_ID_FORMAT = "%Y-%m"
DATE_FORMAT = "%Y-%m-%d"

DEFAULT_BASE_SALARY = 10000
DEFAULT_MONTHLY_WORK_DAYS = 20
DEFAULT_FRIDAY_RATE = 500
DEFAULT_VACATION_DAYS_INITIAL = 0
DEFAULT_SICK_DAYS_INITIAL = 0
DEFAULT_VACATION_DAYS_ACCRUAL = 1
DEFAULT_SICK_DAYS_ACCRUAL = 1.5

BACKUP_FILENAME_PREFIX = "family-income-backup"
