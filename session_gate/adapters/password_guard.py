"""
Password Guard Adapter - Email/password verification with bcrypt hashes.
"""

import secrets
from typing import Optional, Dict
import bcrypt
from session_gate.ports.auth_port import AuthenticationGuard
from session_gate.domain.principal import Principal

# bcrypt only reads this many bytes of input
MAX_PASSWORD_BYTES = 72


class PasswordGuardAdapter(AuthenticationGuard):
    """
    Email/password guard over an in-memory principal directory.

    Passwords are stored as bcrypt hashes. Unknown emails are checked
    against a throwaway hash so response time does not reveal which
    emails are registered. Passwords longer than bcrypt accepts cannot be
    registered and never verify.
    """

    def __init__(self, rounds: int = 12):
        """
        Initialize the guard.

        Args:
            rounds: bcrypt cost factor for newly hashed passwords
        """
        self._rounds = rounds
        # Format: {email: Principal}
        self._principals: Dict[str, Principal] = {}
        # Format: {principal_id: Principal}
        self._by_id: Dict[str, Principal] = {}
        # Format: {principal_id: bcrypt hash}
        self._hashes: Dict[str, bytes] = {}
        self._dummy_hash: Optional[bytes] = None

    @staticmethod
    def _normalize(email: str) -> str:
        return email.strip().lower()

    def _hash(self, secret: bytes) -> bytes:
        return bcrypt.hashpw(secret, bcrypt.gensalt(rounds=self._rounds))

    def _burn_check(self, secret: bytes) -> None:
        """Spend one bcrypt comparison on a hash nobody owns."""
        if self._dummy_hash is None:
            self._dummy_hash = self._hash(secrets.token_hex(16).encode("ascii"))
        bcrypt.checkpw(secret[:MAX_PASSWORD_BYTES], self._dummy_hash)

    def register(
        self,
        email: str,
        password: str,
        name: Optional[str] = None,
    ) -> Principal:
        """
        Add a principal that can log in.

        Args:
            email: Login email, unique
            password: Plaintext password to hash, at most 72 bytes as UTF-8
            name: Display name (defaults to the email's local part)

        Returns:
            The registered principal

        Raises:
            ValueError: If the email is already registered or the password is too long
        """
        key = self._normalize(email)
        if key in self._principals:
            raise ValueError(f"Principal already registered: {key}")

        secret = password.encode("utf-8")
        if len(secret) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password longer than {MAX_PASSWORD_BYTES} bytes")

        principal = Principal.create(name=name or key.split("@")[0], email=key)
        self._hashes[principal.principal_id] = self._hash(secret)
        self._principals[key] = principal
        self._by_id[principal.principal_id] = principal
        return principal

    def deactivate(self, email: str) -> bool:
        """
        Block a principal from logging in and from existing sessions.

        Returns:
            True if deactivated, False if not found
        """
        principal = self._principals.get(self._normalize(email))
        if not principal:
            return False

        principal.is_active = False
        return True

    def verify(self, email: str, password: str) -> Optional[Principal]:
        """
        Check an email/password pair.

        Args:
            email: Login email
            password: Plaintext password

        Returns:
            Principal if valid and active, None otherwise
        """
        principal = self._principals.get(self._normalize(email))
        secret = password.encode("utf-8")

        # Unknown email, or a password too long to ever have been registered
        if not principal or len(secret) > MAX_PASSWORD_BYTES:
            self._burn_check(secret)
            return None

        hashed = self._hashes[principal.principal_id]
        if not bcrypt.checkpw(secret, hashed):
            return None

        if not principal.is_active:
            return None

        return principal

    def get_principal(self, principal_id: str) -> Optional[Principal]:
        """Look up a principal by ID."""
        return self._by_id.get(principal_id)
