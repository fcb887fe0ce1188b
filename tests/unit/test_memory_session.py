"""
Unit tests for the in-memory session adapter.
"""

import threading
import pytest
from datetime import datetime, timedelta
from session_gate.adapters.memory_session import MemorySessionAdapter
from session_gate.domain.session import SessionStatus


@pytest.fixture
def store():
    return MemorySessionAdapter()


def test_create_and_get(store):
    """Created sessions can be read back."""
    session = store.create(ttl=3600)

    assert store.get(session.session_id) is session
    assert store.is_valid(session.session_id)
    assert len(store) == 1


def test_get_unknown(store):
    """Unknown IDs resolve to nothing."""
    assert store.get("nope") is None
    assert not store.is_valid("nope")


def test_expired_session_removed_on_read(store):
    """Expired sessions are dropped when read."""
    session = store.create(ttl=3600)
    session.expires_at = datetime.utcnow() - timedelta(seconds=1)

    assert store.get(session.session_id) is None
    assert len(store) == 0


def test_save(store):
    """Saving persists principal and CSRF token changes."""
    session = store.create(ttl=3600)
    session.principal_id = "prn_1"
    session.csrf_token = "tok"

    assert store.save(session) is True
    stored = store.get(session.session_id)
    assert stored.principal_id == "prn_1"
    assert stored.csrf_token == "tok"


def test_save_after_invalidate(store):
    """A destroyed session cannot be saved back."""
    session = store.create(ttl=3600)
    store.invalidate(session.session_id)

    assert store.save(session) is False
    assert store.get(session.session_id) is None


def test_regenerate(store):
    """Regeneration moves data to a new ID and kills the old one."""
    session = store.create(ttl=3600)
    session.principal_id = "prn_1"
    session.csrf_token = "tok"
    old_id = session.session_id

    rotated = store.regenerate(old_id, ttl=3600)

    assert rotated is not None
    assert rotated.session_id != old_id
    assert rotated.principal_id == "prn_1"
    assert rotated.csrf_token == "tok"
    assert store.get(old_id) is None
    assert store.get(rotated.session_id) is rotated


def test_regenerate_unknown(store):
    """Regenerating an unknown session yields nothing."""
    assert store.regenerate("nope") is None


def test_invalidate(store):
    """Invalidated sessions are revoked and gone."""
    session = store.create(ttl=3600)
    session.principal_id = "prn_1"

    assert store.invalidate(session.session_id) is True
    assert session.status == SessionStatus.REVOKED
    assert store.get(session.session_id) is None
    assert store.invalidate(session.session_id) is False


def test_cleanup_expired(store):
    """Cleanup removes only expired sessions."""
    live = store.create(ttl=3600)
    dead_1 = store.create(ttl=3600)
    dead_2 = store.create(ttl=3600)
    dead_1.expires_at = datetime.utcnow() - timedelta(seconds=1)
    dead_2.expires_at = datetime.utcnow() - timedelta(seconds=1)

    assert store.cleanup_expired() == 2
    assert len(store) == 1
    assert store.get(live.session_id) is live


def test_concurrent_regenerate(store):
    """Racing rotations of one session: exactly one wins, none blow up."""
    session = store.create(ttl=3600)
    barrier = threading.Barrier(8)
    results = []
    errors = []

    def rotate():
        barrier.wait()
        try:
            results.append(store.regenerate(session.session_id, ttl=3600))
        except Exception as exc:
            errors.append(exc)

    threads = [threading.Thread(target=rotate) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
    winners = [r for r in results if r is not None]
    assert len(winners) == 1
    assert len(store) == 1
    assert store.get(winners[0].session_id) is winners[0]


def test_concurrent_read_of_expired_session(store):
    """Many readers of one expired session all see nothing."""
    session = store.create(ttl=3600)
    session.expires_at = datetime.utcnow() - timedelta(seconds=1)
    barrier = threading.Barrier(8)
    results = []

    def read():
        barrier.wait()
        results.append(store.get(session.session_id))

    threads = [threading.Thread(target=read) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert results == [None] * 8
    assert len(store) == 0
