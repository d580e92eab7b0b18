"""Error kinds raised by the service layer.

The API layer converts each of these to a JSON response with a status code,
see ``pharmatrack.api.errors``.
"""

from typing import Any


class PharmaTrackError(Exception):
    """Base class for failures surfaced to API callers.

    Attributes:
        message: Human-readable description returned to the caller
        error: Optional extra detail (validation errors, underlying cause)
    """

    def __init__(self, message: str, error: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.error = error


class RecordValidationError(PharmaTrackError):
    """Raised when a required field is missing or malformed."""


class DuplicateRecordError(PharmaTrackError):
    """Raised when a unique key (username, orderNumber) already exists."""


class RecordNotFoundError(PharmaTrackError):
    """Raised when a credential, order or files namespace does not exist."""


class AuthenticationError(PharmaTrackError):
    """Raised when an identifier/secret pair does not verify."""


class StorageError(PharmaTrackError):
    """Raised when the database or the upload filesystem fails."""
