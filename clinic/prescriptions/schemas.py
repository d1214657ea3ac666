"""
Prescription Schemas - Pydantic models for prescription item validation and serialization.

A payload always describes a single medication; a list of medications is
rejected rather than split.
"""
from typing import Optional
from pydantic import BaseModel, Field, field_validator

from ..core.validation import not_blank

class PrescriptionItemCreate(BaseModel):
    """
    Prescription Item Create Schema - One medication for one appointment

    Fields:
    - appointment_id: ID of an existing appointment
    - medication: Medication name (required)
    - dosage: Amount per intake (optional)
    - frequency: How often to take it (optional)
    """
    appointment_id: int
    medication: str = Field(..., max_length=100)
    dosage: Optional[str] = Field(None, max_length=100)
    frequency: Optional[str] = Field(None, max_length=100)

    @field_validator("medication")
    @classmethod
    def validate_medication(cls, v):
        """Medication name must not be blank"""
        return not_blank(v)

    class Config:
        """Configuration for Pydantic model"""
        extra = "forbid"
        json_schema_extra = {
            "example": {
                "appointment_id": 1,
                "medication": "Losartán 50mg",
                "dosage": "1 tableta",
                "frequency": "Cada 12 horas"
            }
        }

class PrescriptionItemUpdate(BaseModel):
    """Prescription Item Update Schema - The appointment cannot change"""
    medication: Optional[str] = Field(None, max_length=100)
    dosage: Optional[str] = Field(None, max_length=100)
    frequency: Optional[str] = Field(None, max_length=100)

    @field_validator("medication")
    @classmethod
    def validate_medication(cls, v):
        """Medication cannot be cleared or blank"""
        return not_blank(v)

    class Config:
        """Configuration for Pydantic model"""
        extra = "forbid"

class PrescriptionItemResponse(BaseModel):
    """Prescription Item Response Schema - Used when returning prescription items"""
    id: int
    appointment_id: int
    medication: str
    dosage: Optional[str] = None
    frequency: Optional[str] = None

    class Config:
        """Configuration for Pydantic model to enable ORM mode"""
        from_attributes = True
