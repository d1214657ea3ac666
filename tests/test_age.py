"""
Tests for patient age calculation.
"""
import pytest
from datetime import date

from clinic.patients.age import calculate_age, calculate_patient_age
from clinic.patients.service import create_patient


@pytest.mark.parametrize("birth_date, today, expected", [
    (date(1990, 3, 15), date(2025, 11, 2), 35),
    # Birthday later this month: not reached yet
    (date(2000, 11, 5), date(2025, 11, 3), 24),
    (date(2000, 11, 5), date(2025, 11, 5), 25),
    (date(2000, 11, 5), date(2025, 11, 6), 25),
    (date(1985, 7, 20), date(2025, 7, 19), 39),
    (date(2000, 2, 29), date(2023, 2, 28), 22),
    (date(2000, 2, 29), date(2023, 3, 1), 23),
    (date(2025, 11, 2), date(2025, 11, 2), 0),
])
def test_calculate_age(birth_date, today, expected):
    assert calculate_age(birth_date, today) == expected


def test_patient_age(db, patient):
    assert calculate_patient_age(db, patient.id, today=date(2025, 11, 2)) == 35


def test_patient_age_defaults_to_today(db):
    today = date.today()
    patient = create_patient(db, {"name": "Recién Nacido", "birth_date": today})
    assert calculate_patient_age(db, patient.id) == 0


def test_missing_patient_returns_none(db):
    assert calculate_patient_age(db, 999, today=date(2025, 11, 2)) is None
