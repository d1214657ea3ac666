"""
Patient Schemas - Pydantic models for patient data validation and serialization.
"""
from typing import Optional
from datetime import date
from pydantic import BaseModel, EmailStr, Field, field_validator

from ..core.validation import not_blank, not_null

class PatientCreate(BaseModel):
    """
    Patient Create Schema - Used when registering a patient

    Fields:
    - name: Patient's full name (required)
    - birth_date: Patient's date of birth (required)
    - phone: Contact phone number (optional)
    - email: Contact email address (optional)
    - address: Home address (optional)
    """
    name: str = Field(..., max_length=100, description="Patient's full name")
    birth_date: date = Field(..., description="Patient's date of birth")
    phone: Optional[str] = Field(None, max_length=15, description="Contact phone number")
    email: Optional[EmailStr] = Field(None, max_length=100, description="Contact email address")
    address: Optional[str] = Field(None, max_length=200, description="Home address")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        """Name must not be blank"""
        return not_blank(v)

    class Config:
        """Configuration for Pydantic model"""
        extra = "forbid"
        json_schema_extra = {
            "example": {
                "name": "Juan Pérez",
                "birth_date": "1990-03-15",
                "phone": "3001112233",
                "email": "juan.perez@example.com",
                "address": "Calle 10 #12-34"
            }
        }

class PatientUpdate(BaseModel):
    """
    Patient Update Schema - Used for partial updates

    Only fields that are explicitly set are applied. The id is not part of
    the schema and cannot be changed.
    """
    name: Optional[str] = Field(None, max_length=100)
    birth_date: Optional[date] = None
    phone: Optional[str] = Field(None, max_length=15)
    email: Optional[EmailStr] = Field(None, max_length=100)
    address: Optional[str] = Field(None, max_length=200)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        """Name cannot be cleared or blank"""
        return not_blank(v)

    @field_validator("birth_date")
    @classmethod
    def validate_birth_date(cls, v):
        """Birth date cannot be cleared"""
        return not_null(v)

    class Config:
        """Configuration for Pydantic model"""
        extra = "forbid"

class PatientResponse(BaseModel):
    """Patient Response Schema - Used when returning patient data"""
    id: int
    name: str
    birth_date: date
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None

    class Config:
        """Configuration for Pydantic model to enable ORM mode"""
        from_attributes = True
