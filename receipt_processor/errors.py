"""Error taxonomy for receipt processing.

Every error carries the HTTP status and the client-facing description the
API layer responds with. Descriptions are fixed strings; field-level detail
never reaches the client.
"""

from __future__ import annotations


class ReceiptProcessorError(Exception):
    """Base class for receipt processor failures."""

    status_code: int = 500
    description: str = "Internal Server Error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.description)


class InvalidReceiptError(ReceiptProcessorError):
    """Raised when a submitted receipt document fails validation."""

    status_code = 400
    description = "The receipt is invalid"

    def __init__(self, message: str | None = None, errors: list[dict] | None = None) -> None:
        super().__init__(message)
        self.errors = list(errors or [])


class ReceiptNotFoundError(ReceiptProcessorError, KeyError):
    """Raised when no score record exists for an identifier."""

    status_code = 404
    description = "No receipt found for that id"

    def __str__(self) -> str:
        # KeyError.__str__ would wrap the message in quotes
        return Exception.__str__(self)


class StorageError(ReceiptProcessorError):
    """Raised when reading from the store fails for a reason other than a missing key."""

    status_code = 500
    description = "Unable to retrieve points for that receipt"


__all__ = [
    "ReceiptProcessorError",
    "InvalidReceiptError",
    "ReceiptNotFoundError",
    "StorageError",
]
