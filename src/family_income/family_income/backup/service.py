"""JSON backup export/import of the whole application state."""

from __future__ import annotations

import json
import logging
from datetime import date
from pathlib import Path
from typing import Optional

from ..common.datetime_utils import now_local
from ..core.constants import BACKUP_FILENAME_PREFIX
from ..core.exceptions import ValidationError
from ..state.model import AppState
from ..state.service import StateService

logger = logging.getLogger(__name__)


class BackupService:
    def __init__(self, state: StateService):
        self._state = state

    def export_json(self, state: Optional[AppState] = None) -> str:
        state = state or self._state.get_state()
        return json.dumps(state.to_dict(), ensure_ascii=False, indent=2)

    @staticmethod
    def backup_filename(today: Optional[date] = None) -> str:
        today = today or now_local().date()
        return f"{BACKUP_FILENAME_PREFIX}-{today.isoformat()}.json"

    def import_json(self, text: str | bytes) -> AppState:
        """Parse a backup and replace the stored state with it."""
        try:
            data = json.loads(text)
        except (TypeError, ValueError) as e:
            raise ValidationError("Backup file could not be read") from e

        if not isinstance(data, dict) or not data.get("settings") or "monthlyData" not in data:
            raise ValidationError("Invalid backup file: expected 'settings' and 'monthlyData'")

        state = AppState.from_dict(data)
        return self._state.restore(state)

    def write_backup(self, directory: str | Path, *, today: Optional[date] = None) -> Path:
        out_dir = Path(directory)
        out_dir.mkdir(parents=True, exist_ok=True)
        out_file = out_dir / self.backup_filename(today)
        out_file.write_text(self.export_json(), encoding="utf-8")
        logger.info("Backup written to %s", out_file)
        return out_file

    def read_backup(self, path: str | Path) -> AppState:
        return self.import_json(Path(path).read_text(encoding="utf-8"))
