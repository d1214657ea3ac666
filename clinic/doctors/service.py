"""
Doctor Service - Business logic for the doctor registry.

This module provides service functions for doctor registration, profile
updates and specialty lookups.
"""
from typing import Any, List, Mapping, Optional, Union
from sqlalchemy.orm import Session
import logging

from ..core.persistence import commit_changes, ensure_no_dependents, get_or_raise
from ..core.validation import validate_payload
from ..appointments.models import Appointment
from ..medical_records.models import MedicalHistoryRecord
from .models import Doctor
from .schemas import DoctorCreate, DoctorUpdate

# Set up logging
logger = logging.getLogger(__name__)

def create_doctor(db: Session, doctor_data: Union[DoctorCreate, Mapping[str, Any]]) -> Doctor:
    """
    Register a new doctor.

    Args:
        db: Database session
        doctor_data: Doctor fields (name and specialty required)

    Returns:
        Doctor: Created doctor with its assigned id

    Raises:
        ValidationException: If a required field is missing or malformed
    """
    data = validate_payload(DoctorCreate, doctor_data)

    doctor = Doctor(**data.model_dump())
    db.add(doctor)
    commit_changes(db, doctor, "create doctor")
    logger.info(f"Created doctor {doctor.id} ({doctor.specialty})")
    return doctor

def get_doctor(db: Session, doctor_id: int) -> Doctor:
    """
    Get a doctor by ID.

    Raises:
        ResourceNotFoundException: If doctor not found
    """
    return get_or_raise(db, Doctor, doctor_id, "doctor")

def update_doctor(
    db: Session,
    doctor_id: int,
    doctor_data: Union[DoctorUpdate, Mapping[str, Any]]
) -> Doctor:
    """
    Update a doctor with the fields that were supplied.

    Args:
        db: Database session
        doctor_id: ID of the doctor
        doctor_data: Fields to change

    Returns:
        Doctor: Updated doctor

    Raises:
        ResourceNotFoundException: If doctor not found
        ValidationException: If name or specialty would be cleared
    """
    data = validate_payload(DoctorUpdate, doctor_data)
    doctor = get_doctor(db, doctor_id)

    update_data = data.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(doctor, field, value)

    commit_changes(db, doctor, f"update doctor {doctor_id}")
    logger.info(f"Doctor {doctor_id} updated: {sorted(update_data)}")
    return doctor

def list_doctors(db: Session, specialty: Optional[str] = None) -> List[Doctor]:
    """
    List doctors ordered by id.

    Args:
        db: Database session
        specialty: Optional case-insensitive substring filter on specialty

    Returns:
        List of doctors
    """
    query = db.query(Doctor)
    if specialty:
        query = query.filter(Doctor.specialty.ilike(f"%{specialty}%"))
    return query.order_by(Doctor.id).all()

def delete_doctor(db: Session, doctor_id: int) -> None:
    """
    Delete a doctor that nothing references.

    Raises:
        ResourceNotFoundException: If doctor not found
        ConflictException: If appointments or history records reference the doctor
    """
    doctor = get_doctor(db, doctor_id)
    ensure_no_dependents(db, "doctor", doctor_id, [
        (Appointment, Appointment.doctor_id, "appointment"),
        (MedicalHistoryRecord, MedicalHistoryRecord.doctor_id, "medical history"),
    ])

    db.delete(doctor)
    commit_changes(db, action=f"delete doctor {doctor_id}")
    logger.info(f"Doctor {doctor_id} deleted")
