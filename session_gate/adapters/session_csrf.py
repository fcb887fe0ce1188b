"""
Session CSRF Adapter - CSRF tokens kept on the session record.
"""

import secrets
from typing import Optional
from session_gate.ports.csrf_port import CsrfPort
from session_gate.ports.session_port import SessionPort
from session_gate.domain.session import Session


class SessionCsrfAdapter(CsrfPort):
    """
    Synchronizer-token CSRF defence.

    One random token per session, stored with the session and compared in
    constant time against the token the client echoes back.
    """

    def __init__(self, sessions: SessionPort, token_bytes: int = 32):
        """
        Initialize CSRF adapter.

        Args:
            sessions: Store that persists the token with the session
            token_bytes: Entropy of generated tokens
        """
        self._sessions = sessions
        self._token_bytes = token_bytes

    def issue_token(self, session: Session) -> str:
        """Return the existing token or mint and persist a new one."""
        if session.csrf_token:
            return session.csrf_token
        return self.regenerate_token(session)

    def validate(self, token: Optional[str], session: Session) -> bool:
        """Constant-time comparison against the session's token."""
        if not token or not session.csrf_token:
            return False
        return secrets.compare_digest(token.encode("utf-8"), session.csrf_token.encode("utf-8"))

    def regenerate_token(self, session: Session) -> str:
        """Mint a new token and persist it with the session."""
        session.csrf_token = secrets.token_urlsafe(self._token_bytes)
        self._sessions.save(session)
        return session.csrf_token
