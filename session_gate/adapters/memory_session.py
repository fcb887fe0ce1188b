"""
Memory Session Adapter - In-memory session storage (testing only).
"""

import threading
from typing import Optional, Dict
from session_gate.ports.session_port import SessionPort
from session_gate.domain.session import Session


class MemorySessionAdapter(SessionPort):
    """
    In-memory session storage.

    WARNING: Only for testing. Sessions are lost on restart.
    Not suitable for production or multi-process deployments.

    Safe to share between the worker threads of one process.
    """

    def __init__(self):
        """Initialize in-memory storage."""
        self._sessions: Dict[str, Session] = {}
        self._lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._sessions)

    def create(self, ttl: int = 7200) -> Session:
        """Create a new guest session in memory."""
        session = Session.create(ttl=ttl)
        with self._lock:
            self._sessions[session.session_id] = session
        return session

    def get(self, session_id: str) -> Optional[Session]:
        """Get a session from memory."""
        with self._lock:
            session = self._sessions.get(session_id)

            if not session:
                return None

            if not session.is_valid():
                # Auto-cleanup expired session
                self._sessions.pop(session_id, None)
                return None

            return session

    def save(self, session: Session) -> bool:
        """Store the session object under its ID."""
        with self._lock:
            if session.session_id not in self._sessions:
                return False

            session.update_activity()
            self._sessions[session.session_id] = session
            return True

    def regenerate(self, session_id: str, ttl: int = 7200) -> Optional[Session]:
        """Migrate a session to a new ID and drop the old one."""
        with self._lock:
            session = self.get(session_id)
            if not session:
                return None

            migrated = session.migrate(ttl)
            self._sessions.pop(session_id, None)
            self._sessions[migrated.session_id] = migrated
            return migrated

    def invalidate(self, session_id: str) -> bool:
        """Revoke and remove a session."""
        with self._lock:
            session = self._sessions.pop(session_id, None)
        if not session:
            return False

        # Holders of the object see it as dead too
        session.revoke()
        return True

    def is_valid(self, session_id: str) -> bool:
        """Check the session still exists and has not expired."""
        return self.get(session_id) is not None

    def cleanup_expired(self) -> int:
        """Clean up expired sessions."""
        with self._lock:
            expired_ids = [
                sid for sid, sess in self._sessions.items()
                if not sess.is_valid()
            ]

            for session_id in expired_ids:
                self._sessions.pop(session_id, None)

        return len(expired_ids)
