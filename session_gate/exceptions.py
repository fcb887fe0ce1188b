"""
Session Gate Exceptions - Errors raised by the gateway and surfaced at the HTTP boundary.

Every exception carries the HTTP status it maps to, so the web layer can turn
any of them into a JSON response without knowing the concrete type.
"""

from typing import Optional, Dict, Any, List


class SessionGateError(Exception):
    """Base exception for all session gate errors"""

    status_code: int = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """
        Initialize base exception.

        Args:
            message: Human-readable error message
            details: Optional additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Response body for this error."""
        return {"message": self.message}


class ValidationError(SessionGateError):
    """Malformed request body"""

    status_code = 422

    def __init__(self, errors: Dict[str, List[str]], details: Optional[Dict[str, Any]] = None):
        """
        Initialize validation error.

        Args:
            errors: Messages per offending field, in field order
            details: Additional error context
        """
        first = next(iter(errors.values()), ["The given data was invalid."])
        super().__init__(first[0], details)
        self.errors = errors

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message, "errors": self.errors}


class InvalidCredentials(SessionGateError):
    """Login attempt did not match a known principal.

    The message is deliberately the same whether the email exists or not.
    """

    status_code = 401

    def __init__(self, details: Optional[Dict[str, Any]] = None):
        super().__init__("Invalid credentials", details)


class Unauthenticated(SessionGateError):
    """Request needs an authenticated session and has none"""

    status_code = 401

    def __init__(self, details: Optional[Dict[str, Any]] = None):
        super().__init__("Unauthenticated.", details)


class CsrfMismatch(SessionGateError):
    """CSRF token missing or not matching the session"""

    status_code = 419

    def __init__(self, details: Optional[Dict[str, Any]] = None):
        super().__init__("CSRF token mismatch.", details)
