"""
Session Gate - Cookie session authentication with CSRF protection.

Hexagonal architecture: a small gateway in front of pluggable
authentication, session and CSRF adapters, served over FastAPI.

Usage:
    from session_gate import SessionAuthGateway
    from session_gate.adapters import (
        MemorySessionAdapter, PasswordGuardAdapter, SessionCsrfAdapter,
    )

    sessions = MemorySessionAdapter()
    guard = PasswordGuardAdapter()
    guard.register("test@example.com", "password")

    gateway = SessionAuthGateway(guard, sessions, SessionCsrfAdapter(sessions))

    # Log in
    session = gateway.start_session(None)
    session = gateway.login(session, {"email": "test@example.com", "password": "password"})
"""

__version__ = "0.1.0"

from session_gate.gateway import SessionAuthGateway
from session_gate.domain.principal import Principal
from session_gate.domain.session import Session
from session_gate.domain.credentials import LoginCredentials

__all__ = [
    "SessionAuthGateway",
    "Principal",
    "Session",
    "LoginCredentials",
]
