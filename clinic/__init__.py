"""
Clinic records package.

This package models a medical clinic's scheduling and treatment data:
- Patient and doctor registries
- Appointment ledger with free-form status labels
- Medical history log independent of appointments
- Prescription detail rows, one medication per row
- Upcoming appointments view and patient age calculation
"""
# Register every model on Base.metadata before mappers are configured
from . import models  # noqa: F401
