"""
Unit tests for the session auth gateway.
"""

import pytest
from datetime import datetime, timedelta
from session_gate.gateway import SessionAuthGateway
from session_gate.adapters.memory_session import MemorySessionAdapter
from session_gate.adapters.password_guard import PasswordGuardAdapter
from session_gate.adapters.session_csrf import SessionCsrfAdapter
from session_gate.exceptions import (
    ValidationError,
    InvalidCredentials,
    Unauthenticated,
    CsrfMismatch,
)

VALID = {"email": "test@example.com", "password": "password"}


@pytest.fixture
def store():
    return MemorySessionAdapter()


@pytest.fixture
def guard():
    guard = PasswordGuardAdapter(rounds=4)
    guard.register("test@example.com", "password", name="Test User")
    return guard


@pytest.fixture
def gateway(guard, store):
    return SessionAuthGateway(guard=guard, sessions=store, csrf=SessionCsrfAdapter(store), session_ttl=600)


def test_probe_login(gateway):
    """Probe always returns the fixed message."""
    assert gateway.probe_login() == {"message": "Please login"}


def test_probe_login_ignores_session_state(gateway):
    """Being logged in does not change the probe."""
    session = gateway.login(gateway.start_session(None), VALID)

    assert session.principal_id is not None
    assert gateway.probe_login() == {"message": "Please login"}


def test_start_session_creates_guest(gateway, store):
    """No cookie: a guest session with a CSRF token."""
    session = gateway.start_session(None)

    assert session.principal_id is None
    assert session.csrf_token
    assert store.get(session.session_id) is session


def test_start_session_resumes(gateway):
    """A known ID resumes the same session and token."""
    first = gateway.start_session(None)
    again = gateway.start_session(first.session_id)

    assert again.session_id == first.session_id
    assert again.csrf_token == first.csrf_token


def test_start_session_unknown_id(gateway):
    """Unknown or expired IDs start over."""
    session = gateway.start_session("stale-id")

    assert session.session_id != "stale-id"


def test_verify_csrf(gateway):
    """Matching token passes, anything else raises."""
    session = gateway.start_session(None)

    gateway.verify_csrf(session, session.csrf_token)
    with pytest.raises(CsrfMismatch):
        gateway.verify_csrf(session, "forged")
    with pytest.raises(CsrfMismatch):
        gateway.verify_csrf(session, None)


def test_login_success(gateway, store):
    """Valid credentials rotate the session and bind the principal."""
    guest = gateway.start_session(None)
    old_id = guest.session_id
    token = guest.csrf_token

    session = gateway.login(guest, VALID)

    assert session.session_id != old_id
    assert session.principal_id is not None
    assert session.csrf_token == token
    assert store.get(old_id) is None

    principal = gateway.current_principal(session)
    assert principal.email == "test@example.com"


@pytest.mark.parametrize("payload", [
    {"password": "password"},
    {"email": "not-an-email", "password": "password"},
    {"email": "test@example.com"},
    {},
    None,
])
def test_login_malformed(gateway, store, payload):
    """Malformed payloads fail validation and authenticate nothing."""
    guest = gateway.start_session(None)

    with pytest.raises(ValidationError):
        gateway.login(guest, payload)

    assert store.get(guest.session_id) is guest
    assert guest.principal_id is None
    assert len(store) == 1


@pytest.mark.parametrize("payload", [
    {"email": "test@example.com", "password": "wrong"},
    {"email": "nobody@example.com", "password": "password"},
    {"email": "test@example.com", "password": "x" * 100},
    {"email": "nobody@example.com", "password": "x" * 100},
])
def test_login_invalid_credentials(gateway, store, payload):
    """Wrong credentials: generic error, session untouched."""
    guest = gateway.start_session(None)

    with pytest.raises(InvalidCredentials) as exc_info:
        gateway.login(guest, payload)

    assert exc_info.value.message == "Invalid credentials"
    assert store.get(guest.session_id) is guest
    assert guest.principal_id is None
    with pytest.raises(Unauthenticated):
        gateway.current_principal(guest)


def test_login_after_session_expired(gateway, store):
    """A session that expired mid-request is replaced, not resurrected."""
    guest = gateway.start_session(None)
    guest.expires_at = datetime.utcnow() - timedelta(seconds=1)

    session = gateway.login(guest, VALID)

    assert session.session_id != guest.session_id
    assert session.principal_id is not None
    assert session.csrf_token


def test_logout_invalidates_session(gateway, store):
    """After logout the old session no longer authenticates."""
    session = gateway.login(gateway.start_session(None), VALID)
    old_token = session.csrf_token

    fresh = gateway.logout(session)

    assert fresh.session_id != session.session_id
    assert fresh.principal_id is None
    assert fresh.csrf_token and fresh.csrf_token != old_token
    assert store.get(session.session_id) is None
    with pytest.raises(Unauthenticated):
        gateway.current_principal(session)


def test_logout_when_not_logged_in(gateway):
    """Logout succeeds for guests too."""
    guest = gateway.start_session(None)

    fresh = gateway.logout(guest)

    assert fresh.session_id != guest.session_id


def test_current_principal_requires_session(gateway):
    """No session, guest session: unauthenticated."""
    with pytest.raises(Unauthenticated):
        gateway.current_principal(None)
    with pytest.raises(Unauthenticated):
        gateway.current_principal(gateway.start_session(None))


def test_current_principal_expired(gateway):
    """An expired session stops authenticating."""
    session = gateway.login(gateway.start_session(None), VALID)
    session.expires_at = datetime.utcnow() - timedelta(seconds=1)

    with pytest.raises(Unauthenticated):
        gateway.current_principal(session)


def test_current_principal_deactivated(gateway, guard):
    """Deactivating a principal ends its sessions' access."""
    session = gateway.login(gateway.start_session(None), VALID)
    guard.deactivate("test@example.com")

    with pytest.raises(Unauthenticated):
        gateway.current_principal(session)


def test_complete_lifecycle(gateway):
    """login -> current user -> logout -> unauthenticated."""
    session = gateway.start_session(None)
    session = gateway.login(session, VALID)

    principal = gateway.current_principal(session)
    assert principal.to_public_dict()["email"] == "test@example.com"

    gateway.logout(session)

    with pytest.raises(Unauthenticated):
        gateway.current_principal(session)


def test_login_logging_never_leaks_password(gateway, caplog):
    """Failed and successful logins are logged without secrets."""
    caplog.set_level("DEBUG", logger="session_gate")

    with pytest.raises(InvalidCredentials):
        gateway.login(gateway.start_session(None), {"email": "test@example.com", "password": "s3cret-wrong"})
    gateway.login(gateway.start_session(None), VALID)

    assert "Failed login attempt" in caplog.text
    assert "logged in" in caplog.text
    assert "s3cret-wrong" not in caplog.text
