from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .backup.service import BackupService
from .database.connection import DBConfig, DatabaseConnection
from .payroll.service import PayrollReportService
from .state.mysql_state_repository import MySQLStateRepository
from .state.repository import StateRepository
from .state.service import StateService


@dataclass(frozen=True)
class Container:
    state_repo: StateRepository

    state_service: StateService
    payroll_report_service: PayrollReportService
    backup_service: BackupService


def build_container(*, db_config: Optional[dict] = None, state_repo: Optional[StateRepository] = None) -> Container:
    if state_repo is None:
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config or {}))
        state_repo = MySQLStateRepository(conn)

    state_service = StateService(state_repo)
    payroll_report_service = PayrollReportService(state_service)
    backup_service = BackupService(state_service)

    return Container(
        state_repo=state_repo,
        state_service=state_service,
        payroll_report_service=payroll_report_service,
        backup_service=backup_service,
    )
