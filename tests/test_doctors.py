"""
Tests for the doctor registry.
"""
import pytest
from datetime import date

from clinic.doctors.models import Doctor
from clinic.doctors.service import create_doctor, delete_doctor, get_doctor, list_doctors, update_doctor
from clinic.exceptions import ConflictException, ResourceNotFoundException, ValidationException
from clinic.medical_records.service import record_visit


def test_create_and_get_doctor(db, doctor):
    loaded = get_doctor(db, doctor.id)
    assert loaded.name == "Andrés Ruiz"
    assert loaded.specialty == "Cardiología"
    assert loaded.consultation_schedule == "Lunes a Viernes 8-12"


@pytest.mark.parametrize("payload", [
    {"name": "Laura Ríos"},
    {"specialty": "Pediatría"},
    {"name": "Laura Ríos", "specialty": ""},
])
def test_create_requires_name_and_specialty(db, payload):
    with pytest.raises(ValidationException):
        create_doctor(db, payload)
    assert db.query(Doctor).count() == 0


def test_specialty_length_is_limited(db):
    with pytest.raises(ValidationException):
        create_doctor(db, {"name": "Pedro Mejía", "specialty": "x" * 51})


def test_update_doctor(db, doctor):
    updated = update_doctor(db, doctor.id, {"consultation_schedule": "Sábados 8-12"})
    assert updated.consultation_schedule == "Sábados 8-12"
    assert updated.specialty == "Cardiología"


def test_update_doctor_cannot_clear_specialty(db, doctor):
    with pytest.raises(ValidationException):
        update_doctor(db, doctor.id, {"specialty": None})


def test_update_doctor_rejects_malformed_email(db, doctor):
    with pytest.raises(ValidationException):
        update_doctor(db, doctor.id, {"email": "aruiz@"})
    assert get_doctor(db, doctor.id).email == "aruiz@clinica.com"


def test_update_missing_doctor(db):
    with pytest.raises(ResourceNotFoundException):
        update_doctor(db, 999, {"phone": "6040000000"})


def test_list_doctors_filters_by_specialty(db, doctor):
    create_doctor(db, {"name": "Laura Ríos", "specialty": "Pediatría"})
    create_doctor(db, {"name": "Pedro Mejía", "specialty": "Medicina General"})

    assert len(list_doctors(db)) == 3
    assert [d.name for d in list_doctors(db, specialty="pedia")] == ["Laura Ríos"]


def test_delete_doctor_with_history_conflicts(db, patient, doctor):
    record_visit(db, {"patient_id": patient.id, "doctor_id": doctor.id, "visit_date": date(2025, 9, 15)})
    with pytest.raises(ConflictException):
        delete_doctor(db, doctor.id)


def test_delete_doctor_with_appointment_conflicts(db, appointment, doctor):
    with pytest.raises(ConflictException):
        delete_doctor(db, doctor.id)


def test_delete_doctor_without_dependents(db, doctor):
    delete_doctor(db, doctor.id)
    with pytest.raises(ResourceNotFoundException):
        get_doctor(db, doctor.id)
