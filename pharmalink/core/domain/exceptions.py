"""
Domain Exceptions

Every failure a use case can report. Each class carries its machine-readable
code and the HTTP status the API answers with; pharmalink.api.exception_handlers
renders them as `{error, code, details?}`.
"""

from typing import Any


class DomainException(Exception):
    """Base for business rule violations."""

    code = "DOMAIN_ERROR"
    status_code = 400

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": self.message, "code": self.code}
        if self.details:
            body["details"] = self.details
        return body


class ValidationException(DomainException):
    """Malformed input, or an entity state that fails a check before mutation."""

    code = "VALIDATION_ERROR"
    status_code = 400

    def __init__(self, message: str, field: str | None = None, details: dict[str, Any] | None = None):
        details = dict(details or {})
        if field:
            details["field"] = field
        super().__init__(message, details)
        self.field = field


class AuthenticationException(DomainException):
    """Missing or unverifiable bearer credential."""

    code = "AUTHENTICATION_ERROR"
    status_code = 401

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class AuthorizationException(DomainException):
    code = "AUTHORIZATION_ERROR"
    status_code = 403

    def __init__(self, operation: str, resource: str | None = None, user_id: str | None = None):
        self.operation = operation
        self.resource = resource
        self.user_id = user_id
        target = f" on '{resource}'" if resource else ""
        super().__init__(
            f"Not authorized to perform '{operation}'{target}",
            {"operation": operation, "resource": resource},
        )


class EntityNotFoundException(DomainException):
    code = "ENTITY_NOT_FOUND"
    status_code = 404

    def __init__(self, entity_type: str, entity_id: Any, message: str | None = None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(
            message or f"{entity_type} not found",
            {"entity_type": entity_type, "entity_id": str(entity_id)},
        )


class InvalidOperationException(DomainException):
    """
    The entity exists but its state forbids the operation.

    Accepting an expired request, cancelling one a pharmacy already answered
    and approving an already verified pharmacy all land here.
    """

    code = "INVALID_OPERATION"
    status_code = 409

    def __init__(self, operation: str, current_state: str, message: str | None = None):
        self.operation = operation
        self.current_state = current_state
        super().__init__(
            message or f"Cannot {operation} while {current_state}",
            {"operation": operation, "current_state": current_state},
        )


class ConcurrencyException(DomainException):
    """A conditional write matched no row because another writer got there first."""

    code = "CONCURRENCY_CONFLICT"
    status_code = 409

    def __init__(self, entity_type: str, entity_id: Any, message: str | None = None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(
            message or f"{entity_type} {entity_id} was modified concurrently",
            {"entity_type": entity_type, "entity_id": str(entity_id)},
        )

