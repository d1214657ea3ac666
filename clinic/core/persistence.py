"""
Row lookup, referential integrity and commit helpers.

Foreign keys are checked here before any row is added to the session, so a
rejected write never leaves a partial row behind. The store enforces the same
constraints; anything it still rejects is rolled back and surfaced as a
ForeignKeyException (missing parent on insert or update) or a
ConflictException.
"""
import logging
from typing import Any, Iterable, Optional, Tuple

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ..exceptions import ConflictException, ForeignKeyException, ResourceNotFoundException

# Set up logging
logger = logging.getLogger(__name__)

# PostgreSQL SQLSTATE for foreign_key_violation
FOREIGN_KEY_VIOLATION = "23503"


def get_or_raise(db: Session, model, row_id: Any, label: str):
    """
    Get a row by primary key.

    Args:
        db: Database session
        model: Mapped model class
        row_id: Primary key value
        label: Human-readable entity name used in messages

    Returns:
        The mapped row

    Raises:
        ResourceNotFoundException: If no row has that id
    """
    row = db.query(model).filter(model.id == row_id).first()
    if not row:
        logger.warning(f"{label.capitalize()} {row_id} not found")
        raise ResourceNotFoundException(f"{label.capitalize()} {row_id} not found")
    return row


def ensure_parent_exists(db: Session, model, row_id: Any, label: str) -> None:
    """
    Check that a referenced parent row exists.

    Raises:
        ForeignKeyException: If the parent row is missing
    """
    exists = db.query(model.id).filter(model.id == row_id).first() is not None
    if not exists:
        logger.warning(f"Rejected write referencing missing {label} {row_id}")
        raise ForeignKeyException(label, row_id)


def ensure_no_dependents(
    db: Session,
    label: str,
    row_id: Any,
    dependents: Iterable[Tuple[Any, Any, str]]
) -> None:
    """
    Check that no child rows reference a parent row.

    Args:
        db: Database session
        label: Parent entity name
        row_id: Parent primary key
        dependents: (model, foreign key column, child label) triples to check

    Raises:
        ConflictException: If any child row references the parent
    """
    for model, column, child_label in dependents:
        count = db.query(model).filter(column == row_id).count()
        if count:
            logger.warning(f"Refusing to delete {label} {row_id}: {count} {child_label} row(s) depend on it")
            raise ConflictException(
                f"Cannot delete {label} {row_id}: {count} dependent {child_label} row(s) exist"
            )


def is_foreign_key_violation(error: IntegrityError) -> bool:
    """Whether an integrity error was raised by a foreign key constraint."""
    if getattr(error.orig, "pgcode", None) == FOREIGN_KEY_VIOLATION:
        return True
    return "foreign key" in str(error.orig).lower()


def commit_changes(db: Session, instance: Optional[Any] = None, action: str = "write") -> None:
    """
    Commit the session, refreshing the instance afterwards.

    A commit without an instance is a delete. A foreign key failure there means
    child rows still reference the deleted row; on an insert or update it means
    a referenced parent row is gone.

    Args:
        db: Database session
        instance: Row to refresh after the commit (skipped for deletes)
        action: Description of the operation for log messages

    Raises:
        ForeignKeyException: If an insert or update references a missing parent row
        ConflictException: If the store rejects the write on any other constraint
        SQLAlchemyError: For any other store failure, after rollback
    """
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.error(f"Integrity error during {action}: {str(e.orig)}")
        if instance is not None and is_foreign_key_violation(e):
            raise ForeignKeyException("parent row") from e
        raise ConflictException(f"Store rejected {action}: constraint violated") from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error during {action}: {str(e)}")
        raise
    if instance is not None:
        db.refresh(instance)
