"""
JWT Cookie Codec - Signs the session ID carried in the session cookie.
"""

import jwt
from typing import Optional


class SessionCookieCodec:
    """
    Encode session IDs as signed JWTs for the session cookie.

    Uses PyJWT. The token carries only the session ID; expiry is decided by
    the session store, not by the cookie.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        issuer: str = "session-gate",
    ):
        """
        Initialize cookie codec.

        Args:
            secret: Signing secret (APP_KEY)
            algorithm: JWT algorithm (default HS256)
            issuer: Token issuer claim
        """
        self._secret = secret
        self._algorithm = algorithm
        self._issuer = issuer

    def encode(self, session_id: str) -> str:
        """
        Sign a session ID for the cookie.

        Args:
            session_id: Session ID

        Returns:
            JWT string
        """
        payload = {
            "sid": session_id,
            "iss": self._issuer,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def decode(self, value: Optional[str]) -> Optional[str]:
        """
        Extract the session ID from a cookie value.

        Args:
            value: Raw cookie value (may be None)

        Returns:
            Session ID if the signature verifies, None otherwise
        """
        if not value:
            return None

        try:
            payload = jwt.decode(
                value,
                self._secret,
                algorithms=[self._algorithm],
                issuer=self._issuer,
            )
            return payload["sid"]
        except jwt.InvalidTokenError:
            return None
        except KeyError:
            return None
