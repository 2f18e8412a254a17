"""Common Pydantic schemas shared across the API."""

from pydantic import BaseModel


class ErrorDetail(BaseModel):
    """One itemized validation failure."""

    field: str
    message: str
    type: str


class ErrorResponse(BaseModel):
    """Standardized error response.

    ``errors`` is set for validation failures, ``error`` carries the raw
    message of an unexpected server-side failure.
    """

    success: bool = False
    message: str
    errors: list[ErrorDetail] | None = None
    error: str | None = None
