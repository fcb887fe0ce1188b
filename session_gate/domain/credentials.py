"""
Login Credentials - Typed schema for the login request body.
"""

from typing import Any, Dict, List

import pydantic
from pydantic import BaseModel, EmailStr, Field

from session_gate.exceptions import ValidationError


class LoginCredentials(BaseModel):
    """
    Credentials submitted to POST /login.

    Only lives for the duration of one login request; never stored.
    """

    email: EmailStr
    password: str = Field(min_length=1)

    model_config = {"extra": "ignore"}

    def __repr__(self) -> str:
        return f"LoginCredentials(email={self.email!r}, password='***')"

    __str__ = __repr__

    @classmethod
    def parse(cls, payload: Any) -> "LoginCredentials":
        """
        Validate a raw request body.

        Empty strings and nulls count as missing, so they report
        "required" rather than a format error.

        Raises:
            ValidationError: With messages keyed by field name
        """
        data = {}
        if isinstance(payload, dict):
            data = {k: v for k, v in payload.items() if v is not None and v != ""}

        try:
            return cls.model_validate(data)
        except pydantic.ValidationError as exc:
            raise ValidationError(_field_messages(exc)) from None


def _field_messages(exc: pydantic.ValidationError) -> Dict[str, List[str]]:
    """Turn pydantic errors into per-field messages."""
    errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        name = str(error["loc"][0]) if error["loc"] else "body"
        kind = error["type"]

        if kind in ("missing", "string_too_short"):
            message = f"The {name} field is required."
        elif name == "email" and kind == "value_error":
            message = "The email field must be a valid email address."
        elif kind == "string_type":
            message = f"The {name} field must be a string."
        else:
            message = f"The {name} field is invalid."

        errors.setdefault(name, []).append(message)
    return errors
