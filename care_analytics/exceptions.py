"""Exceptions raised at the ingestion edges of the analytics pipeline."""

from typing import Optional, Sequence


class CareAnalyticsError(Exception):
    """Base class for all errors raised by care_analytics."""


class RecordRejected(ValueError, CareAnalyticsError):
    """
    Raised when a raw row cannot become a canonical record.

    Attributes:
        reason: Human-readable explanation
        missing_fields: Canonical names of the required fields that were empty
    """

    def __init__(self, reason: str, missing_fields: Optional[Sequence[str]] = None):
        self.reason = reason
        self.missing_fields = tuple(missing_fields or ())
        super().__init__(reason)


class SourceError(CareAnalyticsError):
    """
    Raised when the records API cannot deliver a list of rows.

    Attributes:
        message: Error description
        status_code: HTTP status returned by the API, if any
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        if status_code is not None:
            message = f"{message} (status {status_code})"
        super().__init__(message)
