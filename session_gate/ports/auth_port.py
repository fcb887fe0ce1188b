"""
Authentication Guard Port - Interface for credential verification.

Implementations:
- PasswordGuardAdapter: bcrypt-hashed passwords in an in-memory directory
"""

from abc import ABC, abstractmethod
from typing import Optional
from session_gate.domain.principal import Principal


class AuthenticationGuard(ABC):
    """Port: Verify credentials and look up principals."""

    @abstractmethod
    def verify(self, email: str, password: str) -> Optional[Principal]:
        """
        Check an email/password pair.

        Args:
            email: Login email (compared case-insensitively)
            password: Plaintext password as submitted

        Returns:
            Principal if the pair matches an active principal, None otherwise
        """
        pass

    @abstractmethod
    def get_principal(self, principal_id: str) -> Optional[Principal]:
        """
        Look up a principal by ID.

        Args:
            principal_id: Principal ID bound to a session

        Returns:
            Principal if known, None otherwise
        """
        pass
