"""
Doctor Schemas - Pydantic models for doctor data validation and serialization.
"""
from typing import Optional
from pydantic import BaseModel, EmailStr, Field, field_validator

from ..core.validation import not_blank

class DoctorCreate(BaseModel):
    """
    Doctor Create Schema - Used when registering a doctor

    Fields:
    - name: Doctor's full name (required)
    - specialty: Medical specialty (required)
    - phone: Contact phone number (optional)
    - email: Contact email address (optional)
    - consultation_schedule: Consultation hours as free text (optional)
    """
    name: str = Field(..., max_length=100, description="Doctor's full name")
    specialty: str = Field(..., max_length=50, description="Medical specialty")
    phone: Optional[str] = Field(None, max_length=15, description="Contact phone number")
    email: Optional[EmailStr] = Field(None, max_length=100, description="Contact email address")
    consultation_schedule: Optional[str] = Field(None, max_length=100, description="Consultation hours")

    @field_validator("name", "specialty")
    @classmethod
    def validate_required_text(cls, v):
        """Name and specialty must not be blank"""
        return not_blank(v)

    class Config:
        """Configuration for Pydantic model"""
        extra = "forbid"
        json_schema_extra = {
            "example": {
                "name": "Andrés Ruiz",
                "specialty": "Cardiología",
                "phone": "6041111111",
                "email": "aruiz@clinica.com",
                "consultation_schedule": "Lunes a Viernes 8-12"
            }
        }

class DoctorUpdate(BaseModel):
    """Doctor Update Schema - Used for partial updates"""
    name: Optional[str] = Field(None, max_length=100)
    specialty: Optional[str] = Field(None, max_length=50)
    phone: Optional[str] = Field(None, max_length=15)
    email: Optional[EmailStr] = Field(None, max_length=100)
    consultation_schedule: Optional[str] = Field(None, max_length=100)

    @field_validator("name", "specialty")
    @classmethod
    def validate_required_text(cls, v):
        """Name and specialty cannot be cleared or blank"""
        return not_blank(v)

    class Config:
        """Configuration for Pydantic model"""
        extra = "forbid"

class DoctorResponse(BaseModel):
    """Doctor Response Schema - Used when returning doctor data"""
    id: int
    name: str
    specialty: str
    phone: Optional[str] = None
    email: Optional[str] = None
    consultation_schedule: Optional[str] = None

    class Config:
        """Configuration for Pydantic model to enable ORM mode"""
        from_attributes = True
