"""
Session Port - Interface for session storage.

Implementations:
- RedisSessionAdapter: Redis-backed sessions
- MemorySessionAdapter: In-memory sessions (testing only)
"""

from abc import ABC, abstractmethod
from typing import Optional
from session_gate.domain.session import Session


class SessionPort(ABC):
    """Port: Store, rotate and invalidate sessions."""

    @abstractmethod
    def create(self, ttl: int = 7200) -> Session:
        """
        Create a new guest session.

        Args:
            ttl: Time-to-live in seconds (default 2 hours)

        Returns:
            Created session
        """
        pass

    @abstractmethod
    def get(self, session_id: str) -> Optional[Session]:
        """
        Get a session by ID.

        Args:
            session_id: Session ID

        Returns:
            Session if found and valid, None otherwise
        """
        pass

    @abstractmethod
    def save(self, session: Session) -> bool:
        """
        Persist changes made to a session (principal, CSRF token).

        Args:
            session: Session previously returned by this store

        Returns:
            True if saved, False if the session no longer exists
        """
        pass

    @abstractmethod
    def regenerate(self, session_id: str, ttl: int = 7200) -> Optional[Session]:
        """
        Move a session to a fresh ID, keeping its data.

        The old ID stops resolving immediately.

        Args:
            session_id: Current session ID
            ttl: Lifetime of the new session in seconds

        Returns:
            New session, or None if the old one was not found
        """
        pass

    @abstractmethod
    def invalidate(self, session_id: str) -> bool:
        """
        Destroy a session.

        Args:
            session_id: Session ID

        Returns:
            True if invalidated, False if not found
        """
        pass

    @abstractmethod
    def is_valid(self, session_id: str) -> bool:
        """
        Check whether a session ID still resolves to a live session.

        Args:
            session_id: Session ID

        Returns:
            True if the session exists and has not expired
        """
        pass

    @abstractmethod
    def cleanup_expired(self) -> int:
        """
        Clean up expired sessions.

        Returns:
            Number of sessions deleted
        """
        pass
