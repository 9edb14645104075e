from __future__ import annotations

import json
from typing import Optional

import pytest

from src.family_income.family_income.container import build_container
from src.family_income.family_income.main import create_app
from src.family_income.family_income.state.model import AppState


class InMemoryStateRepo:
    def __init__(self, state: Optional[AppState] = None):
        self._state = state

    def load(self) -> Optional[AppState]:
        return self._state

    def save(self, state: AppState) -> None:
        self._state = state


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(build_container(state_repo=InMemoryStateRepo()))
    return app.test_client()


def test_summary_endpoint_reflects_day_edits(client):
    for iso_date in ("2024-01-08", "2024-01-09"):
        resp = client.put(f"/api/days/nachman/{iso_date}", json={"type": "work"})
        assert resp.status_code == 200
    client.put("/api/months/2024-01/calculations", json={"calculations": 5})

    body = client.get("/api/summary/nachman/2024-01").get_json()

    assert body["workDays"] == 2
    assert body["calculationsProfit"] == 100
    assert body["totalSalary"] == 1100
    assert body["currentVacation"] == 1


def test_report_endpoint(client):
    client.put("/api/months/2024-02/mint/bonus", json={"bonus": 200})

    body = client.get("/api/report/2024-02").get_json()

    assert body["monthId"] == "2024-02"
    assert [r["person"] for r in body["rows"]] == ["nachman", "mint"]
    assert body["familyTotal"] == 200


def test_unknown_person_is_404(client):
    resp = client.get("/api/summary/someone/2024-01")

    assert resp.status_code == 404
    assert resp.get_json()["success"] is False


def test_bad_month_is_400(client):
    resp = client.get("/api/summary/mint/2024-13")

    assert resp.status_code == 400


def test_settings_update_validates(client):
    settings = client.get("/api/state").get_json()["settings"]
    settings["mint"]["monthlyWorkDays"] = 0

    resp = client.put("/api/settings", json=settings)

    assert resp.status_code == 400


def test_backup_download_and_restore(client):
    client.put("/api/days/mint/2024-03-04", json={"type": "vacation"})
    resp = client.get("/api/backup")
    assert "family-income-backup-" in resp.headers["Content-Disposition"]
    backup = resp.get_data(as_text=True)

    client.put("/api/days/mint/2024-03-04", json={"type": "none"})
    restore = client.post("/api/backup", data=backup, content_type="application/json")

    assert restore.status_code == 200
    state = client.get("/api/state").get_json()
    assert state["monthlyData"]["2024-03"]["mint"]["days"] == {"2024-03-04": "vacation"}


def test_restore_rejects_garbage(client):
    resp = client.post("/api/backup", data=json.dumps({"foo": 1}), content_type="application/json")

    assert resp.status_code == 400


def test_month_with_list_days_is_400(client):
    resp = client.put("/api/months/2024-01", json={"nachman": {"days": ["2024-01-02"]}})

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_oversized_bonus_is_400(client):
    resp = client.put(
        "/api/months/2024-01/mint/bonus",
        data='{"bonus": 1' + "0" * 400 + "}",
        content_type="application/json",
    )

    assert resp.status_code == 400
