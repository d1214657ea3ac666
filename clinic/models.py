"""
Import all models here so Base.metadata knows every table.
"""
from .database import Base
from .patients.models import Patient
from .doctors.models import Doctor
from .appointments.models import Appointment
from .medical_records.models import MedicalHistoryRecord
from .prescriptions.models import PrescriptionItem

__all__ = [
    "Base",
    "Patient",
    "Doctor",
    "Appointment",
    "MedicalHistoryRecord",
    "PrescriptionItem",
]
