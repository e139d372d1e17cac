from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidDateRangeError(ValidationError):
    """Raised when a leave ends before it starts."""


class UnauthenticatedError(DomainError):
    """Raised when a command needs an actor and none is signed in."""


class ForbiddenError(DomainError):
    """Raised when the actor's role may not perform an action."""


class NotFoundError(DomainError):
    """Raised when a leave request id is unknown."""


class RemoteStoreError(DomainError):
    """Raised when the remote store cannot be reached or answers with an error."""

    def __init__(self, message: str, *, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class SubmissionFailedError(DomainError):
    """Raised when the remote store refused or failed to create a request."""


class UpdateFailedError(DomainError):
    """Raised when the remote store refused or failed to record a decision."""


class DegradedModeError(DomainError):
    """Remote read failed and cached data is served instead.

    Never raised: carried on the synchronisation result for diagnostics.
    """
