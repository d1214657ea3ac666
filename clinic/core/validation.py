"""
Payload validation helpers shared by the service modules.
"""
import logging
from typing import Any, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from ..exceptions import ValidationException

# Set up logging
logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def not_blank(value: Optional[str]) -> str:
    """Strip a required text field, rejecting None and blank strings"""
    if value is None:
        raise ValueError("Field is required")
    value = value.strip()
    if not value:
        raise ValueError("Field must not be blank")
    return value


def not_null(value):
    """Reject an explicit None for a required field"""
    if value is None:
        raise ValueError("Field is required")
    return value


def validate_payload(
    schema_class: Type[SchemaT],
    payload: Union[SchemaT, BaseModel, Mapping[str, Any]]
) -> SchemaT:
    """
    Coerce a payload into the given schema.

    Services accept either an instance of their schema or a plain mapping.
    Instances of another schema are re-validated from the fields that were
    explicitly set on them.

    Args:
        schema_class: Pydantic schema to validate against
        payload: Schema instance or mapping of field values

    Returns:
        The validated schema instance

    Raises:
        ValidationException: If the payload does not satisfy the schema
    """
    if isinstance(payload, schema_class):
        return payload
    if isinstance(payload, BaseModel):
        payload = payload.model_dump(exclude_unset=True)
    try:
        return schema_class.model_validate(payload)
    except ValidationError as e:
        errors = e.errors(include_url=False, include_context=False)
        logger.warning(f"Validation error for {schema_class.__name__}: {errors}")
        raise ValidationException(f"Invalid {schema_class.__name__} data", errors=errors) from e
