"""
Basic Login Example - Gateway with in-memory sessions, no HTTP.
"""

from session_gate import SessionAuthGateway
from session_gate.adapters import MemorySessionAdapter, PasswordGuardAdapter, SessionCsrfAdapter
from session_gate.exceptions import InvalidCredentials, Unauthenticated


def main():
    sessions = MemorySessionAdapter()
    guard = PasswordGuardAdapter()
    gateway = SessionAuthGateway(guard, sessions, SessionCsrfAdapter(sessions))

    principal = guard.register("test@example.com", "password", name="Test User")
    print(f"Registered principal: {principal.name} <{principal.email}>")

    # First contact: guest session with a CSRF token
    session = gateway.start_session(None)
    print(f"\nGuest session: {session.session_id[:12]}...")
    gateway.verify_csrf(session, session.csrf_token)

    # Wrong password
    try:
        gateway.login(session, {"email": "test@example.com", "password": "nope"})
    except InvalidCredentials as e:
        print(f"Login rejected: {e.message}")

    # Login rotates the session ID
    session = gateway.login(session, {"email": "test@example.com", "password": "password"})
    print(f"\nLogged in, new session: {session.session_id[:12]}...")

    current = gateway.current_principal(session)
    print(f"Current user: {current.to_public_dict()}")

    # Logout
    gateway.logout(session)
    print("\nLogged out")

    try:
        gateway.current_principal(session)
    except Unauthenticated as e:
        print(f"Old session after logout: {e.message}")


if __name__ == "__main__":
    main()
