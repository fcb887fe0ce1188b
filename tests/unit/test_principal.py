"""
Unit tests for Principal domain model.
"""

import pytest
from datetime import datetime
from session_gate.domain.principal import Principal


def test_principal_creation():
    """Test basic principal creation."""
    principal = Principal.create(name="Test User", email="  Test@Example.com ")

    assert principal.name == "Test User"
    assert principal.email == "test@example.com"
    assert principal.is_active is True
    assert principal.email_verified_at is None
    assert len(principal.principal_id) == 36  # UUID


def test_public_profile_fields():
    """Public profile exposes only display fields."""
    principal = Principal(
        principal_id="prn_1",
        name="alice",
        email="alice@example.com",
        email_verified_at=datetime(2024, 1, 1, 12, 0, 0),
    )

    profile = principal.to_public_dict()

    assert set(profile) == {"id", "name", "email", "email_verified_at", "created_at", "updated_at"}
    assert profile["id"] == "prn_1"
    assert profile["email"] == "alice@example.com"
    assert profile["email_verified_at"] == "2024-01-01T12:00:00"
    assert "is_active" not in profile


def test_principal_serialization():
    """Test principal to_dict and from_dict."""
    principal = Principal(
        principal_id="prn_1",
        name="alice",
        email="alice@example.com",
        is_active=False,
    )

    # Serialize
    data = principal.to_dict()
    assert data["id"] == "prn_1"
    assert data["is_active"] is False

    # Deserialize
    restored = Principal.from_dict(data)
    assert restored.principal_id == principal.principal_id
    assert restored.name == principal.name
    assert restored.email == principal.email
    assert restored.is_active is False
    assert restored.created_at == principal.created_at
