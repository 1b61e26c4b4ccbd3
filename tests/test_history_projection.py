import datetime

import pytest

from healbot.models import Schedule
from healbot.services import medicine_service, schedule_lifecycle
from healbot.services.history_projection import query_history


@pytest.fixture
def seeded(user, patient, make_patient):
    grandpa = make_patient(user, name="Grandpa", relationship="Grandfather")
    aspirin = medicine_service.create_medicine(user.id, {
        "name": "Aspirin", "dosage": "75", "unit": "mg", "patient_id": patient.id,
        "frequency": "ONCE_DAILY", "times": ["08:00"],
        "startDate": "2025-01-01", "endDate": "2025-01-03",
    })
    statin = medicine_service.create_medicine(user.id, {
        "name": "Statin", "dosage": "10", "unit": "mg", "patient_id": grandpa.id,
        "frequency": "ONCE_DAILY", "times": ["21:00"],
        "startDate": "2025-01-01", "endDate": "2025-01-02",
    })
    return {"aspirin": aspirin, "statin": statin, "grandma": patient, "grandpa": grandpa}


def test_rows_carry_medicine_and_patient_identity(user, seeded):
    rows = query_history(user.id)
    statin_row = next(r for r in rows if r["medicine"] == "Statin")

    assert statin_row["patient_name"] == "Grandpa"
    assert statin_row["patient_id"] == seeded["grandpa"].id
    assert statin_row["dosage"] == "10 mg"
    assert statin_row["frequency"] == "ONCE_DAILY"
    assert statin_row["status"] == "pending"
    assert statin_row["taken_at"] is None
    assert statin_row["event_at"] == statin_row["scheduled_at"]


def test_pending_rows_ordered_by_scheduled_instant_desc(user, seeded):
    rows = query_history(user.id)
    assert [r["event_at"] for r in rows] == [
        "2025-01-03T08:00:00",
        "2025-01-02T21:00:00",
        "2025-01-02T08:00:00",
        "2025-01-01T21:00:00",
        "2025-01-01T08:00:00",
    ]


def test_taken_rows_use_taken_time(user, seeded, monkeypatch):
    first = (
        Schedule.query.filter_by(medicine_id=seeded["aspirin"].id)
        .order_by(Schedule.schedule_date).first()
    )
    monkeypatch.setattr(schedule_lifecycle, "civil_now", lambda: datetime.datetime(2025, 1, 5, 12, 0))
    schedule_lifecycle.mark_taken(user.id, first.id)

    rows = query_history(user.id)

    assert rows[0]["id"] == first.id
    assert rows[0]["status"] == "taken"
    assert rows[0]["event_at"] == rows[0]["taken_at"] == "2025-01-05T12:00:00"
    assert rows[0]["scheduled_at"] == "2025-01-01T08:00:00"


def test_ties_break_on_higher_id(user, patient):
    medicine_service.create_medicine(user.id, {
        "name": "First", "dosage": "1", "unit": "tab", "patient_id": patient.id,
        "times": ["08:00"], "startDate": "2025-01-01",
    })
    medicine_service.create_medicine(user.id, {
        "name": "Second", "dosage": "1", "unit": "tab", "patient_id": patient.id,
        "times": ["08:00"], "startDate": "2025-01-01",
    })

    rows = query_history(user.id)

    assert [r["medicine"] for r in rows] == ["Second", "First"]
    assert rows[0]["id"] > rows[1]["id"]


def test_patient_filter(user, seeded):
    rows = query_history(user.id, seeded["grandpa"].id)
    assert {r["medicine"] for r in rows} == {"Statin"}
    assert len(rows) == 2


def test_other_users_history_is_empty(make_user, seeded):
    stranger = make_user(email="stranger@example.com", name="Stranger")
    assert query_history(stranger.id) == []
    assert query_history(stranger.id, seeded["grandma"].id) == []
