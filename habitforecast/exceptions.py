# habitforecast/exceptions.py

# SECTION: MODULE DOCSTRING
"""Defines the exception hierarchy raised by habitforecast."""

# SECTION: IMPORTS
from typing import Any

# SECTION: EXCEPTION CLASSES


# KLASS: HabitForecastError
class HabitForecastError(Exception):
    """Base class for all habitforecast errors."""

    # FUNC: __init__
    def __init__(self, message: str, details: Any | None = None):
        """Initialize the error.

        Args:
            message: The main error message.
            details: Optional extra context (raw payload fragment, path, ...).
        """
        super().__init__(message)
        self.message = message
        self.details = details


# KLASS: MissingFieldError
class MissingFieldError(HabitForecastError):
    """A required field is absent from a snapshot when it is needed.

    Raised while parsing raw payloads into models and when a computation
    dereferences a value that was never supplied (for example a gear slot
    still holding an unresolved identifier). Never defaulted silently.
    """

    def __init__(self, field: str, model: str | None = None, reason: str | None = None):
        self.field = field
        self.model = model
        where = f" on {model}" if model else ""
        why = f": {reason}" if reason else ""
        super().__init__(f"Missing required field '{field}'{where}{why}")

    def __str__(self) -> str:
        return f"MissingFieldError: {self.message}"


# KLASS: ContentCatalogError
class ContentCatalogError(HabitForecastError):
    """The content catalog could not be loaded or has an unexpected shape."""


# KLASS: InvalidPayloadError
class InvalidPayloadError(HabitForecastError):
    """A snapshot field is present but has a value that cannot be used (wrong type or enum)."""

    def __init__(self, field: str, model: str | None = None, reason: str | None = None):
        self.field = field
        self.model = model
        where = f" on {model}" if model else ""
        why = f": {reason}" if reason else ""
        super().__init__(f"Invalid value for field '{field}'{where}{why}")
