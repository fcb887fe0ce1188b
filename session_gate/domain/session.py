"""
Session Domain Model - Represents a browser session.
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional
from datetime import datetime, timedelta
from enum import Enum
import secrets


class SessionStatus(Enum):
    """Session lifecycle states."""
    ACTIVE = "active"
    EXPIRED = "expired"
    REVOKED = "revoked"


@dataclass
class Session:
    """
    Session entity - server-side state behind the session cookie.

    Domain rules:
    - session_id is cryptographically random
    - A session without principal_id is a guest session (CSRF token only)
    - expires_at must be in the future for active sessions
    - A revoked session never becomes valid again
    """
    session_id: str
    created_at: datetime
    expires_at: datetime
    principal_id: Optional[str] = None
    csrf_token: Optional[str] = None
    status: SessionStatus = SessionStatus.ACTIVE
    last_activity: Optional[datetime] = None

    @staticmethod
    def new_id() -> str:
        """Generate an opaque session identifier."""
        return secrets.token_urlsafe(32)

    @classmethod
    def create(cls, ttl: int = 7200) -> "Session":
        """
        Create a new guest session with generated ID.

        Args:
            ttl: Time-to-live in seconds (default 2 hours)

        Returns:
            New session instance
        """
        now = datetime.utcnow()

        return cls(
            session_id=cls.new_id(),
            created_at=now,
            expires_at=now + timedelta(seconds=ttl),
            status=SessionStatus.ACTIVE,
            last_activity=now,
        )

    @property
    def ttl(self) -> int:
        """Seconds left before expiry (0 when already expired)."""
        remaining = (self.expires_at - datetime.utcnow()).total_seconds()
        return max(int(remaining), 0)

    def is_valid(self) -> bool:
        """Check if session is valid (active and not expired)."""
        if self.status != SessionStatus.ACTIVE:
            return False
        return datetime.utcnow() < self.expires_at

    def migrate(self, ttl: int) -> "Session":
        """
        Copy this session's data under a fresh ID.

        The principal and CSRF token carry over; the copy gets a
        new lifetime. Used to rotate the ID after login.
        """
        now = datetime.utcnow()
        return Session(
            session_id=self.new_id(),
            created_at=now,
            expires_at=now + timedelta(seconds=ttl),
            principal_id=self.principal_id,
            csrf_token=self.csrf_token,
            status=SessionStatus.ACTIVE,
            last_activity=now,
        )

    def revoke(self):
        """Revoke the session."""
        self.status = SessionStatus.REVOKED

    def update_activity(self):
        """Update last activity timestamp."""
        self.last_activity = datetime.utcnow()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dict."""
        return {
            "session_id": self.session_id,
            "principal_id": self.principal_id,
            "csrf_token": self.csrf_token,
            "created_at": self.created_at.isoformat(),
            "expires_at": self.expires_at.isoformat(),
            "status": self.status.value,
            "last_activity": self.last_activity.isoformat() if self.last_activity else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Session":
        """Deserialize from dict."""
        return cls(
            session_id=data["session_id"],
            principal_id=data.get("principal_id"),
            csrf_token=data.get("csrf_token"),
            created_at=datetime.fromisoformat(data["created_at"]),
            expires_at=datetime.fromisoformat(data["expires_at"]),
            status=SessionStatus(data.get("status", "active")),
            last_activity=datetime.fromisoformat(data["last_activity"]) if data.get("last_activity") else None,
        )
