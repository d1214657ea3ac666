"""
Appointment Schemas - Pydantic models for appointment data validation and serialization.

Status is a free-form label of at most 20 characters. No closed vocabulary
is enforced.
"""
from typing import Optional
from datetime import date, time
from pydantic import BaseModel, Field, field_validator

from ..core.validation import not_blank, not_null

class AppointmentCreate(BaseModel):
    """
    Appointment Create Schema - Used when scheduling an appointment

    Fields:
    - patient_id: ID of an existing patient
    - doctor_id: ID of an existing doctor
    - appointment_date: Date of the appointment
    - appointment_time: Time of the appointment
    - reason: Reason for the visit (optional)
    - status: Status label (optional, defaults to the configured scheduled label)
    """
    patient_id: int
    doctor_id: int
    appointment_date: date
    appointment_time: time
    reason: Optional[str] = Field(None, max_length=200)
    status: Optional[str] = Field(None, max_length=20)

    @field_validator("status")
    @classmethod
    def validate_status(cls, v):
        """A supplied status label must not be blank"""
        if v is None:
            return v
        return not_blank(v)

    class Config:
        """Configuration for Pydantic model"""
        extra = "forbid"
        json_schema_extra = {
            "example": {
                "patient_id": 1,
                "doctor_id": 1,
                "appointment_date": "2025-11-06",
                "appointment_time": "09:00:00",
                "reason": "Control de presión",
                "status": "scheduled"
            }
        }

class AppointmentUpdate(BaseModel):
    """
    Appointment Update Schema - Only status, date, time and reason can change

    Patient and doctor are fixed once an appointment is scheduled.
    """
    appointment_date: Optional[date] = None
    appointment_time: Optional[time] = None
    reason: Optional[str] = Field(None, max_length=200)
    status: Optional[str] = Field(None, max_length=20)

    @field_validator("appointment_date", "appointment_time")
    @classmethod
    def validate_schedule(cls, v):
        """Date and time cannot be cleared"""
        return not_null(v)

    @field_validator("status")
    @classmethod
    def validate_status(cls, v):
        """Status cannot be blank"""
        return not_blank(v)

    class Config:
        """Configuration for Pydantic model"""
        extra = "forbid"

class AppointmentStatusUpdate(BaseModel):
    """Appointment Status Update Schema - Any non-blank label is accepted"""
    status: str = Field(..., max_length=20)

    @field_validator("status")
    @classmethod
    def validate_status(cls, v):
        """Status cannot be blank"""
        return not_blank(v)

class AppointmentResponse(BaseModel):
    """Appointment Response Schema - Used when returning appointment data"""
    id: int
    patient_id: int
    doctor_id: int
    appointment_date: date
    appointment_time: time
    reason: Optional[str] = None
    status: Optional[str] = None

    class Config:
        """Configuration for Pydantic model to enable ORM mode"""
        from_attributes = True

class UpcomingAppointment(BaseModel):
    """
    Upcoming Appointment Schema - One row of the upcoming appointments view

    Fields:
    - appointment_id: Appointment ID
    - appointment_date: Date of the appointment
    - appointment_time: Time of the appointment
    - reason: Reason for the visit
    - patient_name: Patient's full name
    - patient_phone: Patient's phone number
    - doctor_name: Doctor's full name
    - doctor_specialty: Doctor's specialty
    - days_remaining: Whole days from today until the appointment (0 for today)
    """
    appointment_id: int
    appointment_date: date
    appointment_time: time
    reason: Optional[str] = None
    patient_name: str
    patient_phone: Optional[str] = None
    doctor_name: str
    doctor_specialty: str
    days_remaining: int

    class Config:
        """Configuration for Pydantic model to enable ORM mode"""
        from_attributes = True
