"""
One-to-many detail rows keyed by a parent id.

A multi-valued attribute of a parent row (for example the medications
prescribed during an appointment) is stored as one child row per value
instead of a delimited list on the parent. These helpers implement the
add / list / update / remove operations for any such child model.
"""
import logging
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from ..exceptions import ValidationException
from .persistence import commit_changes, ensure_parent_exists, get_or_raise

# Set up logging
logger = logging.getLogger(__name__)


def add_detail_row(
    db: Session,
    detail_model,
    parent_model,
    parent_key: str,
    values: Dict[str, Any],
    label: str,
    parent_label: str
):
    """
    Insert one detail row under an existing parent.

    Args:
        db: Database session
        detail_model: Mapped child model class
        parent_model: Mapped parent model class
        parent_key: Name of the child's foreign key attribute
        values: Column values for the new row, including the foreign key
        label: Child entity name
        parent_label: Parent entity name

    Returns:
        The created detail row

    Raises:
        ForeignKeyException: If the parent row does not exist
    """
    parent_id = values[parent_key]
    ensure_parent_exists(db, parent_model, parent_id, parent_label)

    row = detail_model(**values)
    db.add(row)
    commit_changes(db, row, f"add {label}")
    logger.info(f"Added {label} {row.id} to {parent_label} {parent_id}")
    return row


def list_detail_rows(db: Session, detail_model, parent_key: str, parent_id: Any) -> List[Any]:
    """
    List all detail rows of a parent in insertion order.

    An unknown parent id simply has no detail rows.
    """
    column = getattr(detail_model, parent_key)
    return (
        db.query(detail_model)
        .filter(column == parent_id)
        .order_by(detail_model.id)
        .all()
    )


def update_detail_row(
    db: Session,
    detail_model,
    parent_key: str,
    row_id: Any,
    changes: Dict[str, Any],
    label: str
):
    """
    Apply field changes to a single detail row.

    The parent key is never changed; a detail row stays with its parent.

    Raises:
        ValidationException: If the changes include the parent key
        ResourceNotFoundException: If the row does not exist
    """
    if parent_key in changes:
        logger.warning(f"Rejected move of {label} {row_id} to another parent")
        raise ValidationException(f"{parent_key} of a {label} cannot be changed")

    row = get_or_raise(db, detail_model, row_id, label)
    for field, value in changes.items():
        setattr(row, field, value)
    commit_changes(db, row, f"update {label} {row_id}")
    logger.info(f"Updated {label} {row_id}: {sorted(changes)}")
    return row


def remove_detail_row(db: Session, detail_model, row_id: Any, label: str) -> None:
    """
    Delete a single detail row.

    Raises:
        ResourceNotFoundException: If the row does not exist
    """
    row = get_or_raise(db, detail_model, row_id, label)
    db.delete(row)
    commit_changes(db, action=f"remove {label} {row_id}")
    logger.info(f"Removed {label} {row_id}")
