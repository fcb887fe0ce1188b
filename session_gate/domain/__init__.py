"""
Domain Models - Pure business entities.

No infrastructure dependencies. Domain logic only.
"""

from session_gate.domain.principal import Principal
from session_gate.domain.session import Session, SessionStatus
from session_gate.domain.credentials import LoginCredentials

__all__ = [
    "Principal",
    "Session",
    "SessionStatus",
    "LoginCredentials",
]
