"""
Upcoming Appointments View - Appointments within the next few days.

The view joins each appointment with its patient and doctor and keeps the
appointments dated between today and today + window (both inclusive). It is
recomputed on every call; nothing is stored.
"""
from typing import List, Optional
from datetime import date, timedelta
from sqlalchemy import Select, select
from sqlalchemy.orm import Session

from ..config import settings
from ..doctors.models import Doctor
from ..patients.models import Patient
from .models import Appointment
from .schemas import UpcomingAppointment

def upcoming_appointments_query(
    today: date,
    window_days: int,
    status: Optional[str] = None
) -> Select:
    """
    Build the SELECT behind the upcoming appointments view.

    Args:
        today: First day of the window
        window_days: Number of days after today included in the window
        status: Only keep appointments with this status label when given

    Returns:
        Select yielding appointment_id, appointment_date, appointment_time,
        reason, patient_name, patient_phone, doctor_name, doctor_specialty
    """
    query = (
        select(
            Appointment.id.label("appointment_id"),
            Appointment.appointment_date,
            Appointment.appointment_time,
            Appointment.reason,
            Patient.name.label("patient_name"),
            Patient.phone.label("patient_phone"),
            Doctor.name.label("doctor_name"),
            Doctor.specialty.label("doctor_specialty"),
        )
        .join(Patient, Appointment.patient_id == Patient.id)
        .join(Doctor, Appointment.doctor_id == Doctor.id)
        .where(Appointment.appointment_date.between(today, today + timedelta(days=window_days)))
        .order_by(Appointment.appointment_date, Appointment.appointment_time, Appointment.id)
    )
    if status is not None:
        query = query.where(Appointment.status == status)
    return query

def get_upcoming_appointments(
    db: Session,
    today: Optional[date] = None,
    window_days: Optional[int] = None,
    only_scheduled: Optional[bool] = None
) -> List[UpcomingAppointment]:
    """
    Get the appointments of the coming days with patient and doctor details.

    Args:
        db: Database session
        today: Reference date (defaults to the current date)
        window_days: Window length in days (defaults to settings.upcoming_window_days)
        only_scheduled: Keep only appointments whose status is settings.scheduled_status
            (defaults to settings.upcoming_only_scheduled, which is off)

    Returns:
        List of UpcomingAppointment rows ordered by date and time, each with
        days_remaining counted from today
    """
    if today is None:
        today = date.today()
    if window_days is None:
        window_days = settings.upcoming_window_days
    if only_scheduled is None:
        only_scheduled = settings.upcoming_only_scheduled

    status = settings.scheduled_status if only_scheduled else None
    rows = db.execute(upcoming_appointments_query(today, window_days, status)).mappings().all()

    return [
        UpcomingAppointment(**row, days_remaining=(row["appointment_date"] - today).days)
        for row in rows
    ]
