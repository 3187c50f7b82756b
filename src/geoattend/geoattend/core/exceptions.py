from __future__ import annotations

from .enums import RejectionReason


class DomainError(Exception):
    """Base exception for business rule violations."""

    code = "domain-error"


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    code = "validation"


class OperationRejected(DomainError):
    """A lifecycle transition was refused; nothing was written."""

    def __init__(self, reason: RejectionReason, message: str):
        super().__init__(message)
        self.reason = reason

    @property
    def code(self) -> str:  # type: ignore[override]
        return self.reason.value


class NotFoundError(DomainError):
    """Raised when a referenced employee, work-log or document does not exist."""

    code = "not-found"


class CollaboratorError(DomainError):
    """Failure reported by an external collaborator (storage, geolocation, ...)."""

    code = "collaborator-failure"

    def __init__(self, collaborator: str, message: str):
        super().__init__(message)
        self.collaborator = collaborator


class PermissionDeniedError(CollaboratorError):
    """The persistence collaborator refused access (distinct from not-found)."""

    code = "permission-denied"
