"""
Prescription Service - Business logic for prescription detail rows.

Each call handles exactly one medication of one appointment.
"""
from typing import Any, List, Mapping, Union
from sqlalchemy.orm import Session

from ..core.detail import add_detail_row, list_detail_rows, remove_detail_row, update_detail_row
from ..core.persistence import get_or_raise
from ..core.validation import validate_payload
from ..appointments.models import Appointment
from .models import PrescriptionItem
from .schemas import PrescriptionItemCreate, PrescriptionItemUpdate

def add_prescription_item(
    db: Session,
    item_data: Union[PrescriptionItemCreate, Mapping[str, Any]]
) -> PrescriptionItem:
    """
    Add one medication to an appointment.

    Args:
        db: Database session
        item_data: Item fields (appointment id and medication name required)

    Returns:
        PrescriptionItem: Created item

    Raises:
        ValidationException: If the medication name is empty or a field is malformed
        ForeignKeyException: If the appointment does not exist
    """
    data = validate_payload(PrescriptionItemCreate, item_data)
    return add_detail_row(
        db,
        PrescriptionItem,
        Appointment,
        "appointment_id",
        data.model_dump(),
        label="prescription item",
        parent_label="appointment",
    )

def get_prescription_item(db: Session, item_id: int) -> PrescriptionItem:
    """
    Get a prescription item by ID.

    Raises:
        ResourceNotFoundException: If item not found
    """
    return get_or_raise(db, PrescriptionItem, item_id, "prescription item")

def update_prescription_item(
    db: Session,
    item_id: int,
    item_data: Union[PrescriptionItemUpdate, Mapping[str, Any]]
) -> PrescriptionItem:
    """
    Edit medication, dosage or frequency of a single item.

    Raises:
        ResourceNotFoundException: If item not found
        ValidationException: If the medication name would be cleared
    """
    data = validate_payload(PrescriptionItemUpdate, item_data)
    return update_detail_row(
        db, PrescriptionItem, "appointment_id", item_id,
        data.model_dump(exclude_unset=True), "prescription item"
    )

def remove_prescription_item(db: Session, item_id: int) -> None:
    """
    Remove a single item from its appointment.

    Raises:
        ResourceNotFoundException: If item not found
    """
    remove_detail_row(db, PrescriptionItem, item_id, "prescription item")

def list_prescription_items(db: Session, appointment_id: int) -> List[PrescriptionItem]:
    """List the items of an appointment in insertion order (possibly empty)"""
    return list_detail_rows(db, PrescriptionItem, "appointment_id", appointment_id)
