"""
Medical History Model - Stores diagnosis and treatment per patient visit.

History records reference a patient and a doctor directly. They are not tied
to an appointment row, so a visit can be logged without one.
"""
from sqlalchemy import Column, Integer, Date, ForeignKey, Text
from sqlalchemy.orm import relationship
from ..database import Base

class MedicalHistoryRecord(Base):
    """
    Medical History Model - Stores patient visit records

    Fields:
    - id: Primary key for history record
    - patient_id: Foreign key to Patient model
    - doctor_id: Foreign key to Doctor model
    - visit_date: Date of the visit
    - diagnosis: Medical diagnosis
    - treatment: Treatment given
    """
    __tablename__ = "medical_history"

    id = Column(Integer, primary_key=True, index=True)
    patient_id = Column(Integer, ForeignKey("patients.id", ondelete="RESTRICT"), nullable=False, index=True)
    doctor_id = Column(Integer, ForeignKey("doctors.id", ondelete="RESTRICT"), nullable=False, index=True)
    visit_date = Column(Date, nullable=False)
    diagnosis = Column(Text, nullable=True)
    treatment = Column(Text, nullable=True)

    # Relationships
    patient = relationship("Patient", back_populates="medical_records")
    doctor = relationship("Doctor", back_populates="medical_records")

    def __repr__(self):
        """String representation of the MedicalHistoryRecord model"""
        return f"<MedicalHistoryRecord(id={self.id}, patient_id={self.patient_id}, doctor_id={self.doctor_id})>"
