"""
Patient age calculation.
"""
from typing import Optional
from datetime import date
from sqlalchemy.orm import Session

from .models import Patient

def calculate_age(birth_date: date, today: date) -> int:
    """
    Age in completed years as of today.

    One year is taken off the calendar-year difference while today's
    month/day is still before the birthday.
    """
    age = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age

def calculate_patient_age(db: Session, patient_id: int, today: Optional[date] = None) -> Optional[int]:
    """
    Age of a registered patient.

    Args:
        db: Database session
        patient_id: ID of the patient
        today: Reference date (defaults to the current date)

    Returns:
        Age in whole years, or None when no patient has that id
    """
    birth_date = db.query(Patient.birth_date).filter(Patient.id == patient_id).scalar()
    if birth_date is None:
        return None
    return calculate_age(birth_date, today or date.today())
