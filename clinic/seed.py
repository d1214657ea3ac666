"""
Sample clinic data.

Loads three patients, doctors, appointments, history records and
prescription items through the service layer, so every row passes the same
validation and foreign key checks as regular writes.
"""
import logging
from datetime import date, time
from sqlalchemy.orm import Session

from .appointments.service import schedule_appointment
from .doctors.service import create_doctor
from .medical_records.service import record_visit
from .patients.models import Patient
from .patients.service import create_patient
from .prescriptions.service import add_prescription_item

logger = logging.getLogger(__name__)

SAMPLE_PATIENTS = [
    {"name": "Juan Pérez", "birth_date": date(1990, 3, 15), "phone": "3001112233",
     "email": "juan.perez@example.com", "address": "Calle 10 #12-34"},
    {"name": "María Gómez", "birth_date": date(1985, 7, 20), "phone": "3002223344",
     "email": "maria.gomez@example.com", "address": "Carrera 45 #67-89"},
    {"name": "Carlos López", "birth_date": date(2000, 11, 5), "phone": "3003334455",
     "email": "carlos.lopez@example.com", "address": "Transversal 30 #15-20"},
]

SAMPLE_DOCTORS = [
    {"name": "Andrés Ruiz", "specialty": "Cardiología", "phone": "6041111111",
     "email": "aruiz@clinica.com", "consultation_schedule": "Lunes a Viernes 8-12"},
    {"name": "Laura Ríos", "specialty": "Pediatría", "phone": "6042222222",
     "email": "lrios@clinica.com", "consultation_schedule": "Lunes a Viernes 14-18"},
    {"name": "Pedro Mejía", "specialty": "Medicina General", "phone": "6043333333",
     "email": "pmejia@clinica.com", "consultation_schedule": "Sábados 8-12"},
]

# (patient index, doctor index, date, time, reason, status)
SAMPLE_APPOINTMENTS = [
    (0, 0, date(2025, 11, 6), time(9, 0), "Control de presión", "scheduled"),
    (1, 1, date(2025, 11, 8), time(15, 30), "Control de crecimiento", "scheduled"),
    (2, 2, date(2025, 11, 3), time(10, 15), "Dolor de cabeza", "completed"),
]

# (patient index, doctor index, visit date, diagnosis, treatment)
SAMPLE_HISTORY = [
    (0, 0, date(2025, 10, 1), "Hipertensión controlada", "Ajuste de dosis de medicamento"),
    (1, 1, date(2025, 9, 15), "Infección respiratoria leve", "Antibiótico por 7 días"),
    (2, 2, date(2025, 11, 3), "Cefalea tensional", "Analgésicos y reposo"),
]

# (appointment index, medication, dosage, frequency)
SAMPLE_PRESCRIPTIONS = [
    (0, "Losartán 50mg", "1 tableta", "Cada 12 horas"),
    (1, "Amoxicilina 250mg", "1 cucharadita", "Cada 8 horas"),
    (2, "Acetaminofén 500mg", "1 tableta", "Cada 6 horas"),
]

def clinic_has_data(db: Session) -> bool:
    """
    Check if any patient exists in the database.

    Args:
        db: Database session

    Returns:
        bool: True if at least one patient exists, False otherwise
    """
    return db.query(Patient).count() > 0

def seed_sample_data(db: Session) -> bool:
    """
    Load the sample clinic data into an empty database.

    Args:
        db: Database session

    Returns:
        bool: True if the data was loaded, False if patients already existed
    """
    if clinic_has_data(db):
        logger.info("Clinic already has patients, skipping sample data")
        return False

    patients = [create_patient(db, data) for data in SAMPLE_PATIENTS]
    doctors = [create_doctor(db, data) for data in SAMPLE_DOCTORS]

    appointments = [
        schedule_appointment(db, {
            "patient_id": patients[p].id,
            "doctor_id": doctors[d].id,
            "appointment_date": day,
            "appointment_time": at,
            "reason": reason,
            "status": status,
        })
        for p, d, day, at, reason, status in SAMPLE_APPOINTMENTS
    ]

    for p, d, day, diagnosis, treatment in SAMPLE_HISTORY:
        record_visit(db, {
            "patient_id": patients[p].id,
            "doctor_id": doctors[d].id,
            "visit_date": day,
            "diagnosis": diagnosis,
            "treatment": treatment,
        })

    for a, medication, dosage, frequency in SAMPLE_PRESCRIPTIONS:
        add_prescription_item(db, {
            "appointment_id": appointments[a].id,
            "medication": medication,
            "dosage": dosage,
            "frequency": frequency,
        })

    logger.info(
        f"Loaded sample data: {len(patients)} patients, {len(doctors)} doctors, "
        f"{len(appointments)} appointments"
    )
    return True
