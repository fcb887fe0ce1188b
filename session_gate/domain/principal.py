"""
Principal Domain Model - The authenticated identity.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, Optional
from datetime import datetime
import uuid


@dataclass
class Principal:
    """
    Principal entity - a user who can log in.

    Domain rules:
    - principal_id is immutable
    - email is unique, compared case-insensitively (enforced by the guard)
    - Password hashes live with the guard, never on the principal
    """
    principal_id: str
    name: str
    email: str

    email_verified_at: Optional[datetime] = None
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)
    is_active: bool = True

    @classmethod
    def create(cls, name: str, email: str) -> "Principal":
        """Create a principal with a generated ID."""
        return cls(
            principal_id=str(uuid.uuid4()),
            name=name,
            email=email.strip().lower(),
        )

    def to_public_dict(self) -> Dict[str, Any]:
        """Profile fields safe to return from /user."""
        return {
            "id": self.principal_id,
            "name": self.name,
            "email": self.email,
            "email_verified_at": self.email_verified_at.isoformat() if self.email_verified_at else None,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dict."""
        data = self.to_public_dict()
        data["is_active"] = self.is_active
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Principal":
        """Deserialize from dict."""
        return cls(
            principal_id=data["id"],
            name=data["name"],
            email=data["email"],
            email_verified_at=datetime.fromisoformat(data["email_verified_at"]) if data.get("email_verified_at") else None,
            created_at=datetime.fromisoformat(data["created_at"]) if data.get("created_at") else datetime.utcnow(),
            updated_at=datetime.fromisoformat(data["updated_at"]) if data.get("updated_at") else datetime.utcnow(),
            is_active=data.get("is_active", True),
        )
