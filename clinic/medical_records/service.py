"""
Medical History Service - Business logic for the medical history log.

Visits are recorded against a patient and a doctor only; no appointment
row is needed or referenced.
"""
from typing import Any, List, Mapping, Union
from sqlalchemy.orm import Session
import logging

from ..core.persistence import commit_changes, ensure_parent_exists, get_or_raise
from ..core.validation import validate_payload
from ..doctors.models import Doctor
from ..patients.models import Patient
from .models import MedicalHistoryRecord
from .schemas import MedicalRecordCreate, MedicalRecordUpdate

# Set up logging
logger = logging.getLogger(__name__)

def record_visit(
    db: Session,
    record_data: Union[MedicalRecordCreate, Mapping[str, Any]]
) -> MedicalHistoryRecord:
    """
    Log a visit in the medical history.

    Args:
        db: Database session
        record_data: Visit fields (patient, doctor and visit date required)

    Returns:
        MedicalHistoryRecord: Created history record

    Raises:
        ValidationException: If a required field is missing or malformed
        ForeignKeyException: If the patient or doctor does not exist
    """
    data = validate_payload(MedicalRecordCreate, record_data)
    ensure_parent_exists(db, Patient, data.patient_id, "patient")
    ensure_parent_exists(db, Doctor, data.doctor_id, "doctor")

    record = MedicalHistoryRecord(**data.model_dump())
    db.add(record)
    commit_changes(db, record, "record visit")
    logger.info(f"Recorded visit {record.id} for patient {record.patient_id} on {record.visit_date}")
    return record

def get_medical_record(db: Session, record_id: int) -> MedicalHistoryRecord:
    """
    Get a history record by ID.

    Raises:
        ResourceNotFoundException: If record not found
    """
    return get_or_raise(db, MedicalHistoryRecord, record_id, "medical history record")

def update_medical_record(
    db: Session,
    record_id: int,
    record_data: Union[MedicalRecordUpdate, Mapping[str, Any]]
) -> MedicalHistoryRecord:
    """
    Update visit date, diagnosis or treatment of a history record.

    Raises:
        ResourceNotFoundException: If record not found
        ValidationException: If the visit date would be cleared
    """
    data = validate_payload(MedicalRecordUpdate, record_data)
    record = get_medical_record(db, record_id)

    update_data = data.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(record, field, value)

    commit_changes(db, record, f"update medical history record {record_id}")
    logger.info(f"Medical history record {record_id} updated: {sorted(update_data)}")
    return record

def list_patient_history(db: Session, patient_id: int) -> List[MedicalHistoryRecord]:
    """
    List a patient's history ordered by visit date.

    Raises:
        ResourceNotFoundException: If patient not found
    """
    get_or_raise(db, Patient, patient_id, "patient")
    return (
        db.query(MedicalHistoryRecord)
        .filter(MedicalHistoryRecord.patient_id == patient_id)
        .order_by(MedicalHistoryRecord.visit_date, MedicalHistoryRecord.id)
        .all()
    )

def delete_medical_record(db: Session, record_id: int) -> None:
    """
    Delete a history record.

    Raises:
        ResourceNotFoundException: If record not found
    """
    record = get_medical_record(db, record_id)
    db.delete(record)
    commit_changes(db, action=f"delete medical history record {record_id}")
    logger.info(f"Medical history record {record_id} deleted")
