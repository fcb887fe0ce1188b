"""
Ports - Interfaces for the gateway's collaborators.

Hexagonal architecture: These define WHAT we need, not HOW.
Adapters provide the HOW.
"""

from session_gate.ports.auth_port import AuthenticationGuard
from session_gate.ports.session_port import SessionPort
from session_gate.ports.csrf_port import CsrfPort

__all__ = [
    "AuthenticationGuard",
    "SessionPort",
    "CsrfPort",
]
