"""Backup the stored state as a JSON file.

Note: the file has the same shape as the in-app backup download, so it can be
restored with POST /api/backup.
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.family_income.family_income.container import build_container


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    out_dir = REPO_ROOT / getattr(settings, "BACKUP_DIR", "backups")
    out_file = container.backup_service.write_backup(out_dir)
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
