"""
Doctor Model - Stores doctor identity, specialty and consultation schedule.
"""
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from ..database import Base

class Doctor(Base):
    """
    Doctor Model - Stores doctor information

    Fields:
    - id: Primary key for doctor
    - name: Doctor's full name
    - specialty: Medical specialty
    - phone: Contact phone number
    - email: Contact email address
    - consultation_schedule: Free-text consultation hours (e.g. "Mon-Fri 8-12")
    """
    __tablename__ = "doctors"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    specialty = Column(String(50), nullable=False)
    phone = Column(String(15), nullable=True)
    email = Column(String(100), nullable=True)
    consultation_schedule = Column(String(100), nullable=True)

    # Relationships
    appointments = relationship("Appointment", back_populates="doctor", passive_deletes="all")
    medical_records = relationship("MedicalHistoryRecord", back_populates="doctor", passive_deletes="all")

    def __repr__(self):
        """String representation of the Doctor model"""
        return f"<Doctor(id={self.id}, name='{self.name}', specialty='{self.specialty}')>"
