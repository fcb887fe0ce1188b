"""
CSRF Port - Interface for cross-site request forgery tokens.

Implementations:
- SessionCsrfAdapter: token stored on the session record
"""

from abc import ABC, abstractmethod
from typing import Optional
from session_gate.domain.session import Session


class CsrfPort(ABC):
    """Port: Issue and check session-bound CSRF tokens."""

    @abstractmethod
    def issue_token(self, session: Session) -> str:
        """
        Return the session's CSRF token, creating one if it has none.

        Args:
            session: Session the token is bound to

        Returns:
            CSRF token
        """
        pass

    @abstractmethod
    def validate(self, token: Optional[str], session: Session) -> bool:
        """
        Check a submitted token against the session.

        Args:
            token: Token sent by the client (may be None)
            session: Current session

        Returns:
            True if the token matches, False otherwise
        """
        pass

    @abstractmethod
    def regenerate_token(self, session: Session) -> str:
        """
        Replace the session's CSRF token.

        Args:
            session: Session to rotate the token on

        Returns:
            New CSRF token
        """
        pass
