"""
Patient Service - Business logic for the patient registry.

This module provides service functions for registering, reading, updating
and listing patients. Patients are retained for clinical history; deletion
is only possible while no appointment or history record references them.
"""
from typing import Any, List, Mapping, Union
from sqlalchemy.orm import Session
import logging

from ..core.persistence import commit_changes, ensure_no_dependents, get_or_raise
from ..core.validation import validate_payload
from ..appointments.models import Appointment
from ..medical_records.models import MedicalHistoryRecord
from .models import Patient
from .schemas import PatientCreate, PatientUpdate

# Set up logging
logger = logging.getLogger(__name__)

def create_patient(db: Session, patient_data: Union[PatientCreate, Mapping[str, Any]]) -> Patient:
    """
    Register a new patient.

    Args:
        db: Database session
        patient_data: Patient fields (name and birth date required)

    Returns:
        Patient: Created patient with its assigned id

    Raises:
        ValidationException: If a required field is missing or malformed
    """
    data = validate_payload(PatientCreate, patient_data)

    patient = Patient(**data.model_dump())
    db.add(patient)
    commit_changes(db, patient, "create patient")
    logger.info(f"Created patient {patient.id}")
    return patient

def get_patient(db: Session, patient_id: int) -> Patient:
    """
    Get a patient by ID.

    Args:
        db: Database session
        patient_id: ID of the patient

    Returns:
        Patient: Patient record

    Raises:
        ResourceNotFoundException: If patient not found
    """
    return get_or_raise(db, Patient, patient_id, "patient")

def update_patient(
    db: Session,
    patient_id: int,
    patient_data: Union[PatientUpdate, Mapping[str, Any]]
) -> Patient:
    """
    Update a patient with the fields that were supplied.

    Args:
        db: Database session
        patient_id: ID of the patient
        patient_data: Fields to change

    Returns:
        Patient: Updated patient

    Raises:
        ResourceNotFoundException: If patient not found
        ValidationException: If a required field would be cleared
    """
    data = validate_payload(PatientUpdate, patient_data)
    patient = get_patient(db, patient_id)

    update_data = data.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(patient, field, value)

    commit_changes(db, patient, f"update patient {patient_id}")
    logger.info(f"Patient {patient_id} updated: {sorted(update_data)}")
    return patient

def list_patients(db: Session) -> List[Patient]:
    """List all patients ordered by id"""
    return db.query(Patient).order_by(Patient.id).all()

def delete_patient(db: Session, patient_id: int) -> None:
    """
    Delete a patient that nothing references.

    Args:
        db: Database session
        patient_id: ID of the patient

    Raises:
        ResourceNotFoundException: If patient not found
        ConflictException: If appointments or history records reference the patient
    """
    patient = get_patient(db, patient_id)
    ensure_no_dependents(db, "patient", patient_id, [
        (Appointment, Appointment.patient_id, "appointment"),
        (MedicalHistoryRecord, MedicalHistoryRecord.patient_id, "medical history"),
    ])

    db.delete(patient)
    commit_changes(db, action=f"delete patient {patient_id}")
    logger.info(f"Patient {patient_id} deleted")
