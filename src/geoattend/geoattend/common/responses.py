"""JSON error payloads shared by the Flask controllers."""

from __future__ import annotations

from flask import jsonify

from ..core.exceptions import (
    CollaboratorError,
    DomainError,
    NotFoundError,
    OperationRejected,
    PermissionDeniedError,
    ValidationError,
)


def status_for(exc: DomainError) -> int:
    if isinstance(exc, ValidationError):
        return 400
    if isinstance(exc, NotFoundError):
        return 404
    if isinstance(exc, OperationRejected):
        return 409
    if isinstance(exc, PermissionDeniedError):
        return 403
    if isinstance(exc, CollaboratorError):
        return 503
    return 400


def error_response(exc: DomainError):
    return jsonify({"success": False, "reason": exc.code, "message": str(exc)}), status_for(exc)


def system_error_response(message: str = "System error, please try again later"):
    return jsonify({"success": False, "reason": "system-error", "message": message}), 500
