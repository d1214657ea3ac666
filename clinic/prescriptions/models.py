"""
Prescription Item Model - One prescribed medication of an appointment.

Each row holds exactly one medication. An appointment has zero or more items;
there is no multi-valued medication column on the appointment itself.
"""
from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from ..database import Base

class PrescriptionItem(Base):
    """
    Prescription Item Model - Stores a single prescribed medication

    Fields:
    - id: Primary key for prescription item
    - appointment_id: Foreign key to Appointment model
    - medication: Medication name and strength (e.g. "Losartán 50mg")
    - dosage: Amount per intake
    - frequency: How often to take it
    """
    __tablename__ = "prescription_items"

    id = Column(Integer, primary_key=True, index=True)
    appointment_id = Column(Integer, ForeignKey("appointments.id", ondelete="RESTRICT"), nullable=False, index=True)
    medication = Column(String(100), nullable=False)
    dosage = Column(String(100), nullable=True)
    frequency = Column(String(100), nullable=True)

    # Relationships
    appointment = relationship("Appointment", back_populates="prescription_items")

    def __repr__(self):
        """String representation of the PrescriptionItem model"""
        return f"<PrescriptionItem(id={self.id}, appointment_id={self.appointment_id}, medication='{self.medication}')>"
