"""
Domain exception classes for the clinic data model.

Every service operation reports failures through one of these classes:

- ValidationException: a required field is missing or malformed
- ForeignKeyException: a referenced parent row does not exist
- ResourceNotFoundException: the target row of an operation does not exist
- ConflictException: the operation would break a retained invariant,
  e.g. deleting a parent row that still has dependents
"""
from typing import Any, Dict, List, Optional


class ClinicException(Exception):
    """
    Base exception class for clinic-specific exceptions.
    """
    code = "clinic_error"

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail

    def to_dict(self) -> Dict[str, Any]:
        """Serializable form of the error"""
        return {"code": self.code, "detail": self.detail}


class ValidationException(ClinicException):
    """Exception raised when a required field is missing or malformed."""
    code = "validation_error"

    def __init__(self, detail: str = "Validation error", errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(detail)
        self.errors = errors or []

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["errors"] = self.errors
        return data


class ForeignKeyException(ClinicException):
    """Exception raised when a referenced parent row does not exist."""
    code = "foreign_key_error"

    def __init__(self, entity: str, entity_id: Any = None):
        if entity_id is None:
            super().__init__(f"Referenced {entity} does not exist")
        else:
            super().__init__(f"Referenced {entity} {entity_id} does not exist")
        self.entity = entity
        self.entity_id = entity_id


class ResourceNotFoundException(ClinicException):
    """Exception raised when the target of an operation does not exist."""
    code = "not_found"

    def __init__(self, detail: str = "Resource not found"):
        super().__init__(detail)


class ConflictException(ClinicException):
    """Exception raised when an operation would violate a retained invariant."""
    code = "conflict"

    def __init__(self, detail: str = "Operation conflicts with existing data"):
        super().__init__(detail)
