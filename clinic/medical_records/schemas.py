"""
Medical History Schemas - Pydantic models for visit record validation and serialization.
"""
from typing import Optional
from datetime import date
from pydantic import BaseModel, field_validator

from ..core.validation import not_null

class MedicalRecordCreate(BaseModel):
    """
    Medical Record Create Schema - Used when logging a visit

    Fields:
    - patient_id: ID of an existing patient
    - doctor_id: ID of an existing doctor
    - visit_date: Date of the visit
    - diagnosis: Diagnosis text (optional)
    - treatment: Treatment text (optional)
    """
    patient_id: int
    doctor_id: int
    visit_date: date
    diagnosis: Optional[str] = None
    treatment: Optional[str] = None

    class Config:
        """Configuration for Pydantic model"""
        extra = "forbid"

class MedicalRecordUpdate(BaseModel):
    """Medical Record Update Schema - Patient and doctor are fixed"""
    visit_date: Optional[date] = None
    diagnosis: Optional[str] = None
    treatment: Optional[str] = None

    @field_validator("visit_date")
    @classmethod
    def validate_visit_date(cls, v):
        """Visit date cannot be cleared"""
        return not_null(v)

    class Config:
        """Configuration for Pydantic model"""
        extra = "forbid"

class MedicalRecordResponse(BaseModel):
    """Medical Record Response Schema - Used when returning visit records"""
    id: int
    patient_id: int
    doctor_id: int
    visit_date: date
    diagnosis: Optional[str] = None
    treatment: Optional[str] = None

    class Config:
        """Configuration for Pydantic model to enable ORM mode"""
        from_attributes = True
