"""
Adapters - Implementations of ports.

Sessions:
- MemorySessionAdapter: In-memory sessions (testing)
- RedisSessionAdapter: Redis-backed sessions

Authentication:
- PasswordGuardAdapter: bcrypt email/password guard

CSRF:
- SessionCsrfAdapter: Session-bound synchronizer tokens

Cookies:
- SessionCookieCodec: JWT-signed session cookie values
"""

from session_gate.adapters.memory_session import MemorySessionAdapter
from session_gate.adapters.redis_session import RedisSessionAdapter
from session_gate.adapters.password_guard import PasswordGuardAdapter
from session_gate.adapters.session_csrf import SessionCsrfAdapter
from session_gate.adapters.jwt_cookie import SessionCookieCodec

__all__ = [
    "MemorySessionAdapter",
    "RedisSessionAdapter",
    "PasswordGuardAdapter",
    "SessionCsrfAdapter",
    "SessionCookieCodec",
]
