"""
Unit tests for error types.
"""

import pytest
from session_gate.exceptions import (
    SessionGateError,
    ValidationError,
    InvalidCredentials,
    Unauthenticated,
    CsrfMismatch,
)


@pytest.mark.parametrize("error, status, message", [
    (InvalidCredentials(), 401, "Invalid credentials"),
    (Unauthenticated(), 401, "Unauthenticated."),
    (CsrfMismatch(), 419, "CSRF token mismatch."),
])
def test_status_and_body(error, status, message):
    assert isinstance(error, SessionGateError)
    assert error.status_code == status
    assert error.to_dict() == {"message": message}


def test_validation_error_body():
    error = ValidationError({"email": ["The email field is required."], "password": ["x"]})

    assert error.status_code == 422
    assert error.message == "The email field is required."
    assert error.to_dict()["errors"]["password"] == ["x"]


def test_str_includes_details():
    error = Unauthenticated(details={"reason": "expired"})

    assert str(error) == "Unauthenticated. | Details: {'reason': 'expired'}"
    assert str(Unauthenticated()) == "Unauthenticated."
