"""
Redis Session Adapter - Redis-backed session storage.
"""

from typing import Optional
import json
import logging

import redis

from session_gate.ports.session_port import SessionPort
from session_gate.domain.session import Session

logger = logging.getLogger(__name__)


class RedisSessionAdapter(SessionPort):
    """
    Redis-backed session storage.

    Sessions are stored as JSON with automatic expiration (TTL).
    Supports multi-process deployments.
    """

    def __init__(
        self,
        redis_client=None,
        redis_url: str = "redis://localhost:6379/0",
        prefix: str = "session_gate:session:",
    ):
        """
        Initialize Redis session adapter.

        Args:
            redis_client: Redis client instance (redis.Redis); built from redis_url if omitted
            redis_url: Connection URL used when no client is given
            prefix: Key prefix for sessions
        """
        self._redis = redis_client
        self._redis_url = redis_url
        self._prefix = prefix

    def _get_redis(self):
        """Lazy connect to Redis."""
        if self._redis is None:
            self._redis = redis.Redis.from_url(self._redis_url, decode_responses=True)
        return self._redis

    def _key(self, session_id: str) -> str:
        """Generate Redis key for session."""
        return f"{self._prefix}{session_id}"

    def _write(self, session: Session) -> None:
        """Store a session with its remaining lifetime as the key TTL."""
        ttl = max(session.ttl, 1)
        self._get_redis().setex(self._key(session.session_id), ttl, json.dumps(session.to_dict()))

    def create(self, ttl: int = 7200) -> Session:
        """
        Create a new guest session in Redis.

        Args:
            ttl: Time-to-live in seconds

        Returns:
            Created session
        """
        session = Session.create(ttl=ttl)
        self._write(session)
        return session

    def get(self, session_id: str) -> Optional[Session]:
        """
        Get a session from Redis.

        Args:
            session_id: Session ID

        Returns:
            Session if found and valid, None otherwise
        """
        data = self._get_redis().get(self._key(session_id))
        if not data:
            return None

        try:
            session = Session.from_dict(json.loads(data))
        except (json.JSONDecodeError, KeyError, ValueError):
            logger.warning("Discarding unreadable session record")
            return None

        if session.is_valid():
            return session
        return None

    def save(self, session: Session) -> bool:
        """
        Write back a modified session, keeping its expiry.

        Args:
            session: Session to persist

        Returns:
            True if saved, False if the key is gone
        """
        if not self._get_redis().exists(self._key(session.session_id)):
            return False

        session.update_activity()
        self._write(session)
        return True

    def regenerate(self, session_id: str, ttl: int = 7200) -> Optional[Session]:
        """
        Copy a session to a new key and delete the old key.

        Args:
            session_id: Current session ID
            ttl: Lifetime of the new session in seconds

        Returns:
            New session, or None if not found
        """
        session = self.get(session_id)
        if not session:
            return None

        migrated = session.migrate(ttl)

        pipe = self._get_redis().pipeline()
        pipe.setex(self._key(migrated.session_id), ttl, json.dumps(migrated.to_dict()))
        pipe.delete(self._key(session_id))
        pipe.execute()

        return migrated

    def invalidate(self, session_id: str) -> bool:
        """
        Delete a session from Redis.

        Args:
            session_id: Session ID

        Returns:
            True if deleted, False if not found
        """
        return self._get_redis().delete(self._key(session_id)) > 0

    def is_valid(self, session_id: str) -> bool:
        """Check the session key still exists and is readable."""
        return self.get(session_id) is not None

    def cleanup_expired(self) -> int:
        """
        Clean up expired sessions.

        Redis handles expiration automatically via TTL.
        This method is a no-op but provided for interface compatibility.

        Returns:
            0 (Redis auto-expires)
        """
        return 0
