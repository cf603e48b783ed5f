"""
Domain Layer - Core building blocks

- Entities: Objects with identity and lifecycle
- Value Objects: Immutable status enums
- Exceptions: Domain-specific error handling
"""

from pharmalink.core.domain.entities import Entity, generate_id, isoformat, utc_now
from pharmalink.core.domain.value_objects import StatusEnum
from pharmalink.core.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    ConcurrencyException,
    DomainException,
    EntityNotFoundException,
    InvalidOperationException,
    ValidationException,
)

__all__ = [
    "Entity",
    "generate_id",
    "isoformat",
    "utc_now",
    "StatusEnum",
    "AuthenticationException",
    "AuthorizationException",
    "ConcurrencyException",
    "DomainException",
    "EntityNotFoundException",
    "InvalidOperationException",
    "ValidationException",
]
