"""Example: use the service layer directly (no Flask)."""

import importlib

from config import get_settings_module

from src.family_income.family_income.common.datetime_utils import current_month_id
from src.family_income.family_income.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    report = container.payroll_report_service.build_monthly_report(current_month_id())
    for row in report.rows:
        print(row)
    print("family total:", report.family_total)


if __name__ == "__main__":
    main()
