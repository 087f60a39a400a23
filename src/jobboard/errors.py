"""Exceptions shared across the job board data-access layer."""

from typing import Dict, Optional


class JobBoardError(Exception):
    """Base exception for job board operations."""

    pass


class SimulatedTransportFailure(JobBoardError):
    """A simulated request failed, as a remote backend would reject it."""

    pass


class NotFoundError(SimulatedTransportFailure):
    """Raised when a record with the requested id does not exist."""

    def __init__(self, collection: str, record_id: str, message: Optional[str] = None):
        self.collection = collection
        self.record_id = record_id
        super().__init__(message or f"404 - {collection} record {record_id!r} not found")


class ValidationFailure(JobBoardError):
    """Raised when submitted data fails required-field or range checks."""

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        detail = "; ".join(f"{field}: {msg}" for field, msg in self.errors.items())
        super().__init__(f"Validation failed: {detail}")
