"""
Session Auth Gateway - The login / session / logout lifecycle.

Combines the authentication guard, session store and CSRF validator into the
operations behind the HTTP routes. Nothing here knows about HTTP; the web
layer maps return values and exceptions onto responses.
"""

import logging
from typing import Optional, Dict, Any
from session_gate.ports.auth_port import AuthenticationGuard
from session_gate.ports.session_port import SessionPort
from session_gate.ports.csrf_port import CsrfPort
from session_gate.domain.principal import Principal
from session_gate.domain.session import Session
from session_gate.domain.credentials import LoginCredentials
from session_gate.exceptions import InvalidCredentials, Unauthenticated, CsrfMismatch

logger = logging.getLogger(__name__)

PROBE_MESSAGE = "Please login"
LOGIN_MESSAGE = "Login successful"
LOGOUT_MESSAGE = "Logged out"


class SessionAuthGateway:
    """
    Session authentication over pluggable collaborators.

    Example:
        from session_gate.adapters import (
            MemorySessionAdapter, PasswordGuardAdapter, SessionCsrfAdapter,
        )

        sessions = MemorySessionAdapter()
        gateway = SessionAuthGateway(
            guard=PasswordGuardAdapter(),
            sessions=sessions,
            csrf=SessionCsrfAdapter(sessions),
        )

        session = gateway.start_session(None)
        session = gateway.login(session, {"email": "...", "password": "..."})
        principal = gateway.current_principal(session)
        session = gateway.logout(session)
    """

    def __init__(
        self,
        guard: AuthenticationGuard,
        sessions: SessionPort,
        csrf: CsrfPort,
        session_ttl: int = 7200,
    ):
        """
        Initialize gateway with adapters.

        Args:
            guard: Credential verification
            sessions: Session storage
            csrf: CSRF token issuing and checking
            session_ttl: Lifetime of new and rotated sessions in seconds
        """
        self._guard = guard
        self._sessions = sessions
        self._csrf = csrf
        self._session_ttl = session_ttl

    def probe_login(self) -> Dict[str, str]:
        """Fixed "login required" payload; sent with status 401."""
        return {"message": PROBE_MESSAGE}

    def start_session(self, session_id: Optional[str]) -> Session:
        """
        Resume the session named by the cookie or start a guest session.

        Args:
            session_id: ID from the session cookie, None if absent or forged

        Returns:
            A valid session carrying a CSRF token
        """
        session = self._sessions.get(session_id) if session_id else None

        if session is None:
            session = self._sessions.create(ttl=self._session_ttl)
            logger.debug("Started guest session")

        self._csrf.issue_token(session)
        return session

    def verify_csrf(self, session: Session, token: Optional[str]) -> None:
        """
        Reject a state-changing request whose token does not match.

        Raises:
            CsrfMismatch: If the token is missing or wrong
        """
        if not self._csrf.validate(token, session):
            logger.warning("CSRF token mismatch")
            raise CsrfMismatch()

    def login(self, session: Session, payload: Any) -> Session:
        """
        Log a principal in.

        Args:
            session: Current (usually guest) session
            payload: Decoded request body, expected to hold email and password

        Returns:
            The rotated session, now bound to the principal

        Raises:
            ValidationError: If the payload is malformed
            InvalidCredentials: If the guard rejects the credentials
        """
        credentials = LoginCredentials.parse(payload)

        principal = self._guard.verify(credentials.email, credentials.password)
        if principal is None:
            logger.warning("Failed login attempt")
            raise InvalidCredentials()

        rotated = self._sessions.regenerate(session.session_id, ttl=self._session_ttl)
        if rotated is None:
            # Old session expired mid-request
            rotated = self._sessions.create(ttl=self._session_ttl)
            self._csrf.issue_token(rotated)
        logger.debug("Rotated session ID on login")

        rotated.principal_id = principal.principal_id
        self._sessions.save(rotated)

        logger.info(f"Principal {principal.principal_id} logged in")
        return rotated

    def logout(self, session: Session) -> Session:
        """
        Log out (invalidate session + rotate CSRF token).

        Succeeds whether or not the session was authenticated.

        Args:
            session: Session to end

        Returns:
            Fresh guest session with a new CSRF token
        """
        principal_id = session.principal_id
        self._sessions.invalidate(session.session_id)

        fresh = self._sessions.create(ttl=self._session_ttl)
        self._csrf.regenerate_token(fresh)

        if principal_id:
            logger.info(f"Principal {principal_id} logged out")
        return fresh

    def current_principal(self, session: Optional[Session]) -> Principal:
        """
        Principal bound to an authenticated session.

        Args:
            session: Current session (may be None)

        Returns:
            The authenticated principal

        Raises:
            Unauthenticated: If the session is absent, expired, invalidated,
                a guest session, or its principal is gone or inactive
        """
        if session is None or not session.principal_id:
            raise Unauthenticated()

        if not self._sessions.is_valid(session.session_id):
            raise Unauthenticated()

        principal = self._guard.get_principal(session.principal_id)
        if principal is None or not principal.is_active:
            raise Unauthenticated()

        return principal
