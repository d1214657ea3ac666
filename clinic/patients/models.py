"""
Patient Model - Stores patient identity and contact information.

Patients are registry rows: they reference nothing and are referenced by
appointments and medical history records.
"""
from sqlalchemy import Column, Integer, String, Date
from sqlalchemy.orm import relationship
from ..database import Base

class Patient(Base):
    """
    Patient Model - Stores patient information

    Fields:
    - id: Primary key for patient
    - name: Patient's full name
    - birth_date: Patient's date of birth
    - phone: Contact phone number
    - email: Contact email address
    - address: Home address
    """
    __tablename__ = "patients"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    birth_date = Column(Date, nullable=False)
    phone = Column(String(15), nullable=True)
    email = Column(String(100), nullable=True)
    address = Column(String(200), nullable=True)

    # Relationships (children are never removed through the parent)
    appointments = relationship("Appointment", back_populates="patient", passive_deletes="all")
    medical_records = relationship("MedicalHistoryRecord", back_populates="patient", passive_deletes="all")

    def __repr__(self):
        """String representation of the Patient model"""
        return f"<Patient(id={self.id}, name='{self.name}')>"
