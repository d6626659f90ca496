# habitforecast/helpers/_pydantic.py

# SECTION: MODULE DOCSTRING
"""Helper utilities for working consistently with Pydantic models.

Provides the shared base model configuration and `create_from_dict`, which
turns validation errors into `MissingFieldError` or `InvalidPayloadError`
named by their path in the raw payload.
"""

# SECTION: IMPORTS
from typing import Any, Type, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from habitforecast.exceptions import InvalidPayloadError, MissingFieldError

from ._logger import log

# SECTION: BASE MODEL CONFIGURATION


# KLASS: HabitForecastBaseModel
class HabitForecastBaseModel(BaseModel):
    """Base model with consistent configuration for snapshot models."""

    model_config = ConfigDict(
        extra="ignore",  # Habitica payloads carry far more than we read
        populate_by_name=True,
        frozen=True,
    )


T = TypeVar("T", bound=BaseModel)


# SECTION: HELPER FUNCTIONS


# FUNC: format_loc
def format_loc(loc: tuple[Any, ...]) -> str:
    """Joins a pydantic error location into a dotted path (list indexes as [n])."""
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else str(part)
    return path


# FUNC: create_from_dict
def create_from_dict(model_class: Type[T], data: Any, prefix: str = "") -> T:
    """Creates a Pydantic model instance from a raw dictionary.

    Args:
        model_class: The Pydantic model class (e.g., UserAttributes, Daily).
        data: The dictionary containing data to populate the model.
        prefix: Dotted path of `data` inside the enclosing payload, prepended
            to the field name reported by MissingFieldError.

    Returns:
        An instance of model_class populated with data.

    Raises:
        MissingFieldError: If a required field is absent.
        InvalidPayloadError: For any other validation failure (wrong type or value).
        TypeError: If 'data' is not a dictionary.
    """
    if data is None:
        raise MissingFieldError(prefix or model_class.__name__, model=model_class.__name__)
    if not isinstance(data, dict):
        raise TypeError(f"Input data must be a dictionary to create {model_class.__name__}")
    try:
        return model_class.model_validate(data)
    except ValidationError as e:
        errors = e.errors()
        missing = [err for err in errors if err["type"] == "missing"]
        first = missing[0] if missing else errors[0]
        field = _prefixed(prefix, format_loc(first["loc"]))
        if missing:
            log.warning(f"{model_class.__name__} payload is missing '{field}'")
            raise MissingFieldError(field, model=model_class.__name__) from e
        log.warning(f"{model_class.__name__} payload has an invalid '{field}': {first['msg']}")
        raise InvalidPayloadError(field, model=model_class.__name__, reason=first["msg"]) from e


def _prefixed(prefix: str, field: str) -> str:
    if not prefix:
        return field
    if not field:
        return prefix
    return f"{prefix}{field}" if field.startswith("[") else f"{prefix}.{field}"
