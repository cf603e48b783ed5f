"""
Unit tests for domain exception payloads.
"""

import pytest

from pharmalink.core import domain
from pharmalink.core.domain import (
    AuthenticationException,
    AuthorizationException,
    ConcurrencyException,
    DomainException,
    EntityNotFoundException,
    InvalidOperationException,
    ValidationException,
)
from pharmalink.core.domain.value_objects import StatusEnum


class Color(StatusEnum):
    RED = "red"
    BLUE = "blue"


@pytest.mark.unit
class TestDomainExceptions:
    def test_validation_exception_carries_field(self):
        exc = ValidationException("Radius must be positive", field="radius")

        assert exc.to_dict() == {
            "error": "Radius must be positive",
            "code": "VALIDATION_ERROR",
            "details": {"field": "radius"},
        }

    def test_not_found_message(self):
        exc = EntityNotFoundException("Request", "r-1")

        assert exc.message == "Request not found"
        assert exc.details["entity_id"] == "r-1"

    def test_authorization_message_names_resource(self):
        exc = AuthorizationException("cancel", resource="request:r-1")

        assert "cancel" in exc.message
        assert "request:r-1" in exc.message

    def test_concurrency_code(self):
        assert ConcurrencyException("Request", "r-1").code == "CONCURRENCY_CONFLICT"


@pytest.mark.unit
class TestStatusEnum:
    def test_from_string_is_case_insensitive(self):
        assert Color.from_string("RED") is Color.RED

    def test_from_string_rejects_unknown(self):
        with pytest.raises(ValueError):
            Color.from_string("green")

    def test_values(self):
        assert Color.values() == ["red", "blue"]

    def test_from_string_accepts_member_name_and_whitespace(self):
        assert Color.from_string(" Blue ") is Color.BLUE

    def test_str_is_the_value(self):
        assert f"{Color.RED}" == "red"


@pytest.mark.unit
@pytest.mark.parametrize(
    "exc, status_code",
    [
        (ValidationException("bad"), 400),
        (AuthenticationException(), 401),
        (AuthorizationException("accept"), 403),
        (EntityNotFoundException("Pharmacy", "ph-1"), 404),
        (InvalidOperationException("accept", "expired"), 409),
        (ConcurrencyException("Request", "r-1"), 409),
    ],
)
def test_exceptions_carry_http_status(exc, status_code):
    assert exc.status_code == status_code


@pytest.mark.unit
def test_every_exported_exception_is_a_client_error():
    exported = [getattr(domain, name) for name in domain.__all__]
    exception_types = [obj for obj in exported if isinstance(obj, type) and issubclass(obj, DomainException)]

    assert {cls.__name__ for cls in exception_types} == {
        "AuthenticationException",
        "AuthorizationException",
        "ConcurrencyException",
        "DomainException",
        "EntityNotFoundException",
        "InvalidOperationException",
        "ValidationException",
    }
    assert all(400 <= cls.status_code < 500 for cls in exception_types)
