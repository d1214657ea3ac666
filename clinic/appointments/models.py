"""
Appointment Model - Stores scheduled and realized visits.

Each appointment links one patient to one doctor. Medications prescribed
during the appointment live in PrescriptionItem rows, one per medication.
"""
from sqlalchemy import Column, Integer, String, Date, Time, ForeignKey
from sqlalchemy.orm import relationship
from ..database import Base

class Appointment(Base):
    """
    Appointment Model - Stores appointment information

    Fields:
    - id: Primary key for appointment
    - patient_id: Foreign key to Patient model
    - doctor_id: Foreign key to Doctor model
    - appointment_date: Date of the appointment
    - appointment_time: Time of the appointment
    - reason: Reason for the appointment
    - status: Free-form status label (e.g. "scheduled", "completed")
    """
    __tablename__ = "appointments"

    id = Column(Integer, primary_key=True, index=True)
    patient_id = Column(Integer, ForeignKey("patients.id", ondelete="RESTRICT"), nullable=False, index=True)
    doctor_id = Column(Integer, ForeignKey("doctors.id", ondelete="RESTRICT"), nullable=False, index=True)
    appointment_date = Column(Date, nullable=False, index=True)
    appointment_time = Column(Time, nullable=False)
    reason = Column(String(200), nullable=True)
    status = Column(String(20), nullable=True)

    # Relationships
    patient = relationship("Patient", back_populates="appointments")
    doctor = relationship("Doctor", back_populates="appointments")
    prescription_items = relationship(
        "PrescriptionItem",
        back_populates="appointment",
        order_by="PrescriptionItem.id",
        passive_deletes="all",
    )

    def __repr__(self):
        """String representation of the Appointment model"""
        return (
            f"<Appointment(id={self.id}, patient_id={self.patient_id}, doctor_id={self.doctor_id}, "
            f"date='{self.appointment_date}', time='{self.appointment_time}')>"
        )

    def update_status(self, status: str) -> None:
        """
        Update appointment status

        Args:
            status: New status label
        """
        self.status = status
