"""
Appointment Service - Business logic for the appointment ledger.

This module provides service functions for scheduling appointments,
changing their status, date, time or reason, and listing them by date.
"""
from typing import Any, List, Mapping, Union
from datetime import date
from sqlalchemy.orm import Session
import logging

from ..config import settings
from ..core.persistence import commit_changes, ensure_no_dependents, ensure_parent_exists, get_or_raise
from ..core.validation import validate_payload
from ..exceptions import ValidationException
from ..doctors.models import Doctor
from ..patients.models import Patient
from ..prescriptions.models import PrescriptionItem
from .models import Appointment
from .schemas import AppointmentCreate, AppointmentStatusUpdate, AppointmentUpdate

# Set up logging
logger = logging.getLogger(__name__)

def schedule_appointment(
    db: Session,
    appointment_data: Union[AppointmentCreate, Mapping[str, Any]]
) -> Appointment:
    """
    Schedule a new appointment.

    Both parents are checked before the row is added, so a rejected
    appointment is never written.

    Args:
        db: Database session
        appointment_data: Appointment fields (patient, doctor, date and time required)

    Returns:
        Appointment: Created appointment

    Raises:
        ValidationException: If date or time is missing or a field is malformed
        ForeignKeyException: If the patient or doctor does not exist
    """
    data = validate_payload(AppointmentCreate, appointment_data)
    ensure_parent_exists(db, Patient, data.patient_id, "patient")
    ensure_parent_exists(db, Doctor, data.doctor_id, "doctor")

    values = data.model_dump()
    if values["status"] is None:
        values["status"] = settings.scheduled_status

    appointment = Appointment(**values)
    db.add(appointment)
    commit_changes(db, appointment, "schedule appointment")
    logger.info(
        f"Scheduled appointment {appointment.id} for patient {appointment.patient_id} "
        f"with doctor {appointment.doctor_id} on {appointment.appointment_date} {appointment.appointment_time}"
    )
    return appointment

def get_appointment(db: Session, appointment_id: int) -> Appointment:
    """
    Get an appointment by ID.

    Raises:
        ResourceNotFoundException: If appointment not found
    """
    return get_or_raise(db, Appointment, appointment_id, "appointment")

def update_appointment(
    db: Session,
    appointment_id: int,
    appointment_data: Union[AppointmentUpdate, Mapping[str, Any]]
) -> Appointment:
    """
    Change the status, date, time or reason of an appointment.

    Args:
        db: Database session
        appointment_id: ID of the appointment
        appointment_data: Fields to change

    Returns:
        Appointment: Updated appointment

    Raises:
        ResourceNotFoundException: If appointment not found
        ValidationException: If date or time would be cleared
    """
    data = validate_payload(AppointmentUpdate, appointment_data)
    appointment = get_appointment(db, appointment_id)

    update_data = data.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(appointment, field, value)

    commit_changes(db, appointment, f"update appointment {appointment_id}")
    logger.info(f"Appointment {appointment_id} updated: {sorted(update_data)}")
    return appointment

def update_appointment_status(db: Session, appointment_id: int, status: str) -> Appointment:
    """
    Set a new status label on an appointment.

    Any non-blank label is accepted; transitions are not restricted.

    Args:
        db: Database session
        appointment_id: ID of the appointment
        status: New status label

    Returns:
        Appointment: Updated appointment

    Raises:
        ResourceNotFoundException: If appointment not found
        ValidationException: If the label is blank or too long
    """
    data = validate_payload(AppointmentStatusUpdate, {"status": status})
    appointment = get_appointment(db, appointment_id)

    previous = appointment.status
    appointment.update_status(data.status)
    commit_changes(db, appointment, f"update appointment {appointment_id} status")
    logger.info(f"Appointment {appointment_id} status changed from {previous!r} to {data.status!r}")
    return appointment

def list_appointments_by_date_range(db: Session, start: date, end: date) -> List[Appointment]:
    """
    List appointments whose date falls within [start, end], inclusive.

    Args:
        db: Database session
        start: First date of the range
        end: Last date of the range

    Returns:
        Appointments ordered by date, time and id

    Raises:
        ValidationException: If start is after end
    """
    if start > end:
        raise ValidationException(f"Invalid date range: {start} is after {end}")

    return (
        db.query(Appointment)
        .filter(Appointment.appointment_date.between(start, end))
        .order_by(Appointment.appointment_date, Appointment.appointment_time, Appointment.id)
        .all()
    )

def list_patient_appointments(db: Session, patient_id: int) -> List[Appointment]:
    """
    List a patient's appointments in chronological order.

    Raises:
        ResourceNotFoundException: If patient not found
    """
    get_or_raise(db, Patient, patient_id, "patient")
    return (
        db.query(Appointment)
        .filter(Appointment.patient_id == patient_id)
        .order_by(Appointment.appointment_date, Appointment.appointment_time, Appointment.id)
        .all()
    )

def list_doctor_appointments(db: Session, doctor_id: int) -> List[Appointment]:
    """
    List a doctor's appointments in chronological order.

    Raises:
        ResourceNotFoundException: If doctor not found
    """
    get_or_raise(db, Doctor, doctor_id, "doctor")
    return (
        db.query(Appointment)
        .filter(Appointment.doctor_id == doctor_id)
        .order_by(Appointment.appointment_date, Appointment.appointment_time, Appointment.id)
        .all()
    )

def delete_appointment(db: Session, appointment_id: int) -> None:
    """
    Delete an appointment without prescription items.

    Raises:
        ResourceNotFoundException: If appointment not found
        ConflictException: If prescription items reference the appointment
    """
    appointment = get_appointment(db, appointment_id)
    ensure_no_dependents(db, "appointment", appointment_id, [
        (PrescriptionItem, PrescriptionItem.appointment_id, "prescription item"),
    ])

    db.delete(appointment)
    commit_changes(db, action=f"delete appointment {appointment_id}")
    logger.info(f"Appointment {appointment_id} deleted")
