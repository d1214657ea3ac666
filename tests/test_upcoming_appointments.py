"""
Tests for the upcoming appointments view.
"""
from datetime import date, time, timedelta

from clinic.appointments.service import schedule_appointment, update_appointment_status
from clinic.appointments.upcoming import get_upcoming_appointments, upcoming_appointments_query
from clinic.config import settings
from clinic.doctors.service import create_doctor
from clinic.patients.service import create_patient

TODAY = date(2025, 11, 2)


def _schedule(db, patient, doctor, day, at=time(9, 0), **extra):
    payload = {
        "patient_id": patient.id,
        "doctor_id": doctor.id,
        "appointment_date": day,
        "appointment_time": at,
    }
    payload.update(extra)
    return schedule_appointment(db, payload)


def test_window_keeps_next_seven_days_with_days_remaining(db, patient, doctor):
    _schedule(db, patient, doctor, date(2025, 11, 6), reason="Control de presión")
    _schedule(db, patient, doctor, date(2025, 11, 8), time(15, 30))
    _schedule(db, patient, doctor, date(2025, 11, 3), time(10, 15))
    _schedule(db, patient, doctor, date(2025, 12, 1))

    rows = get_upcoming_appointments(db, today=TODAY)

    assert [(r.appointment_date, r.days_remaining) for r in rows] == [
        (date(2025, 11, 3), 1),
        (date(2025, 11, 6), 4),
        (date(2025, 11, 8), 6),
    ]


def test_rows_carry_patient_and_doctor_details(db, patient, doctor):
    appointment = _schedule(db, patient, doctor, date(2025, 11, 6), reason="Control de presión")

    [row] = get_upcoming_appointments(db, today=TODAY)
    assert row.appointment_id == appointment.id
    assert row.appointment_time == time(9, 0)
    assert row.reason == "Control de presión"
    assert row.patient_name == "Juan Pérez"
    assert row.patient_phone == "3001112233"
    assert row.doctor_name == "Andrés Ruiz"
    assert row.doctor_specialty == "Cardiología"


def test_window_bounds_are_inclusive(db, patient, doctor):
    _schedule(db, patient, doctor, TODAY - timedelta(days=1))
    _schedule(db, patient, doctor, TODAY)
    _schedule(db, patient, doctor, TODAY + timedelta(days=7))
    _schedule(db, patient, doctor, TODAY + timedelta(days=8))

    rows = get_upcoming_appointments(db, today=TODAY)
    assert [r.days_remaining for r in rows] == [0, 7]


def test_same_day_ordered_by_time(db, patient, doctor):
    other_patient = create_patient(db, {"name": "María Gómez", "birth_date": date(1985, 7, 20)})
    other_doctor = create_doctor(db, {"name": "Laura Ríos", "specialty": "Pediatría"})
    _schedule(db, other_patient, other_doctor, date(2025, 11, 4), time(15, 30))
    _schedule(db, patient, doctor, date(2025, 11, 4), time(8, 0))

    rows = get_upcoming_appointments(db, today=TODAY)
    assert [r.patient_name for r in rows] == ["Juan Pérez", "María Gómez"]


def test_status_filter_is_off_by_default(db, patient, doctor):
    _schedule(db, patient, doctor, date(2025, 11, 3), status="completed")
    _schedule(db, patient, doctor, date(2025, 11, 4))

    assert len(get_upcoming_appointments(db, today=TODAY)) == 2

    rows = get_upcoming_appointments(db, today=TODAY, only_scheduled=True)
    assert [r.appointment_date for r in rows] == [date(2025, 11, 4)]


def test_status_filter_default_comes_from_settings(db, patient, doctor, monkeypatch):
    appointment = _schedule(db, patient, doctor, date(2025, 11, 3))
    update_appointment_status(db, appointment.id, "completed")

    monkeypatch.setattr(settings, "upcoming_only_scheduled", True)
    assert get_upcoming_appointments(db, today=TODAY) == []


def test_custom_window_length(db, patient, doctor):
    _schedule(db, patient, doctor, date(2025, 11, 3))
    _schedule(db, patient, doctor, date(2025, 11, 6))

    rows = get_upcoming_appointments(db, today=TODAY, window_days=2)
    assert [r.days_remaining for r in rows] == [1]


def test_view_reflects_changes_between_calls(db, patient, doctor):
    assert get_upcoming_appointments(db, today=TODAY) == []
    _schedule(db, patient, doctor, date(2025, 11, 5))
    assert len(get_upcoming_appointments(db, today=TODAY)) == 1


def test_today_defaults_to_current_date(db, patient, doctor):
    _schedule(db, patient, doctor, date.today() + timedelta(days=2))
    [row] = get_upcoming_appointments(db)
    assert row.days_remaining == 2


def test_query_exposes_view_columns():
    query = upcoming_appointments_query(TODAY, 7)
    assert [c.name for c in query.selected_columns] == [
        "appointment_id",
        "appointment_date",
        "appointment_time",
        "reason",
        "patient_name",
        "patient_phone",
        "doctor_name",
        "doctor_specialty",
    ]
