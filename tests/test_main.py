"""
Tests for application startup and sample data.
"""
from datetime import date

from clinic.appointments.models import Appointment
from clinic.appointments.upcoming import get_upcoming_appointments
from clinic.doctors.models import Doctor
from clinic.main import init_app
from clinic.medical_records.models import MedicalHistoryRecord
from clinic.patients.age import calculate_patient_age
from clinic.patients.models import Patient
from clinic.prescriptions.models import PrescriptionItem
from clinic.prescriptions.service import list_prescription_items
from clinic.seed import seed_sample_data


def test_seed_loads_sample_clinic(db):
    assert seed_sample_data(db) is True

    assert db.query(Patient).count() == 3
    assert db.query(Doctor).count() == 3
    assert db.query(Appointment).count() == 3
    assert db.query(MedicalHistoryRecord).count() == 3
    assert db.query(PrescriptionItem).count() == 3


def test_seed_is_skipped_when_patients_exist(db, patient):
    assert seed_sample_data(db) is False
    assert db.query(Patient).count() == 1


def test_sample_data_through_view_and_age(db):
    seed_sample_data(db)

    rows = get_upcoming_appointments(db, today=date(2025, 11, 2))
    assert [(r.patient_name, r.days_remaining) for r in rows] == [
        ("Carlos López", 1),
        ("Juan Pérez", 4),
        ("María Gómez", 6),
    ]

    juan = db.query(Patient).filter(Patient.name == "Juan Pérez").one()
    assert calculate_patient_age(db, juan.id, today=date(2025, 11, 2)) == 35

    first_appointment = db.query(Appointment).order_by(Appointment.id).first()
    [item] = list_prescription_items(db, first_appointment.id)
    assert (item.medication, item.dosage, item.frequency) == ("Losartán 50mg", "1 tableta", "Cada 12 horas")


def test_init_app_without_seed(db, test_engine, session_factory):
    assert init_app(bind=test_engine, session_factory=session_factory, seed=False) is False
    assert db.query(Patient).count() == 0


def test_init_app_seeds_once(db, test_engine, session_factory):
    assert init_app(bind=test_engine, session_factory=session_factory, seed=True) is True
    assert init_app(bind=test_engine, session_factory=session_factory, seed=True) is False
    assert db.query(Patient).count() == 3
