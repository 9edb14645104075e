from __future__ import annotations

import json
from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import AppState
from .repository import StateRepository

STATE_ROW_ID = 1


class MySQLStateRepository(StateRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def load(self) -> Optional[AppState]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT document FROM app_state WHERE id=%s", (STATE_ROW_ID,))
            r = fetchone(cur)
            if not r:
                return None
            return AppState.from_dict(json.loads(r["document"]))

    def save(self, state: AppState) -> None:
        document = json.dumps(state.to_dict(), ensure_ascii=False)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO app_state(id, document)
                VALUES(%s,%s)
                ON DUPLICATE KEY UPDATE document=VALUES(document)
                """,
                (STATE_ROW_ID, document),
            )
