from __future__ import annotations

import pytest

from src.time_bank.time_bank.core.enums import PunchKind
from src.time_bank.time_bank.main import create_app
from src.time_bank.time_bank.punches.memory_repository import InMemoryPunchRepository, InMemoryRosterRepository
from src.time_bank.time_bank.punches.model import PunchRecord


@pytest.fixture
def make_client(monkeypatch, roster):
    monkeypatch.setenv("APP_ENV", "testing")

    def make(punches):
        app = create_app(punches_repo=InMemoryPunchRepository(punches), roster_repo=InMemoryRosterRepository(roster))
        return app.test_client()

    return make


def test_time_bank_endpoint(make_client, workday):
    client = make_client(workday("u1", "2026-10-19", "08:00", "19:00", "12:00", "12:30"))

    res = client.get("/api/time-bank?month=2026-10")

    assert res.status_code == 200
    body = res.get_json()
    assert body["success"] is True
    assert body["month"] == "2026-10"
    ana = next(r for r in body["time_bank"] if r["employee_id"] == "u1")
    assert ana["worked_hours"] == 10.5
    assert ana["overtime_hours"] == 2.5
    assert ana["expected_hours"] == 176
    assert ana["balance_hours"] == -165.5
    assert ana["weeks"][0]["week_start"] == "2026-10-19"
    assert body["summary"]["employees_with_overtime"] == 1


def test_time_bank_endpoint_filters_employee(make_client, workday):
    client = make_client(workday("u1", "2026-10-19", "08:00", "17:00"))

    res = client.get("/api/time-bank?month=2026-10&employee_id=u2")

    rows = res.get_json()["time_bank"]
    assert [r["employee_id"] for r in rows] == ["u2"]
    assert rows[0]["worked_hours"] == 0


@pytest.mark.parametrize("query", ["", "?month=10-2026", "?month=2026-13"])
def test_bad_month_is_400(make_client, query):
    res = make_client([]).get(f"/api/time-bank{query}")

    assert res.status_code == 400
    assert res.get_json()["success"] is False


def test_unknown_employee_is_400(make_client):
    res = make_client([]).get("/api/time-bank?month=2026-10&employee_id=ghost")

    assert res.status_code == 400


def test_malformed_punch_is_422(make_client, workday):
    client = make_client(workday("u1", "2026-10-19", "08:00", "17:00") + [PunchRecord("u1", PunchKind.EXIT, "17h")])

    res = client.get("/api/time-bank?month=2026-10")

    assert res.status_code == 422
    assert "timestamp" in res.get_json()["message"]


def test_alerts_endpoint(make_client):
    res = make_client([]).get("/api/time-bank/alerts")

    assert res.status_code == 200
    assert res.get_json() == {"success": True, "alerts": []}


def test_frequency_endpoint(make_client, workday):
    client = make_client(workday("u1", "2026-10-19", "08:00", "18:00"))

    res = client.get("/api/frequency?start=2026-10-19&end=2026-10-23&employee_id=u1")

    assert res.status_code == 200
    rows = res.get_json()["frequency"]
    assert rows == [
        {
            "employee_id": "u1",
            "name": "Ana Souza",
            "job_title": "Teacher",
            "work_days": 5,
            "days_worked": 1,
            "absences": 4,
            "total_hours": 9.0,
            "avg_hours_per_day": 9.0,
            "rate": "20.0",
        }
    ]


def test_frequency_endpoint_requires_dates(make_client):
    res = make_client([]).get("/api/frequency?start=2026-10-19")

    assert res.status_code == 400
