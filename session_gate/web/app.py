"""
Application factory.

Usage:
    from session_gate.web.app import create_app
    from session_gate.adapters import PasswordGuardAdapter

    guard = PasswordGuardAdapter()
    guard.register("test@example.com", "password")
    app = create_app(guard=guard)
"""

import logging
import secrets
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from session_gate import __version__
from session_gate.adapters.jwt_cookie import SessionCookieCodec
from session_gate.adapters.memory_session import MemorySessionAdapter
from session_gate.adapters.password_guard import PasswordGuardAdapter
from session_gate.adapters.redis_session import RedisSessionAdapter
from session_gate.adapters.session_csrf import SessionCsrfAdapter
from session_gate.config import Settings, get_settings, validate_required_settings
from session_gate.gateway import SessionAuthGateway
from session_gate.ports.auth_port import AuthenticationGuard
from session_gate.ports.session_port import SessionPort
from session_gate.web.errors import register_error_handlers
from session_gate.web.middleware import SessionCookieMiddleware
from session_gate.web.routes import router, session_router

logger = logging.getLogger(__name__)


def build_session_store(settings: Settings) -> SessionPort:
    """Session store for the configured SESSION_DRIVER."""
    if settings.SESSION_DRIVER == "redis":
        logger.info("Using Redis session store")
        return RedisSessionAdapter(redis_url=settings.REDIS_URL)
    return MemorySessionAdapter()


def create_app(
    settings: Optional[Settings] = None,
    guard: Optional[AuthenticationGuard] = None,
    sessions: Optional[SessionPort] = None,
) -> FastAPI:
    """
    Build the FastAPI app.

    Args:
        settings: Settings (default: from environment)
        guard: Authentication guard (default: empty PasswordGuardAdapter)
        sessions: Session store (default: per SESSION_DRIVER)

    Returns:
        Configured application
    """
    if settings is None:
        settings = get_settings()
    validate_required_settings(settings)

    # Stores define __len__, so an empty one is falsy
    if sessions is None:
        sessions = build_session_store(settings)
    if guard is None:
        guard = PasswordGuardAdapter()
    gateway = SessionAuthGateway(
        guard=guard,
        sessions=sessions,
        csrf=SessionCsrfAdapter(sessions),
        session_ttl=settings.session_ttl,
    )
    codec = SessionCookieCodec(secret=settings.APP_KEY or secrets.token_urlsafe(32))

    app = FastAPI(title=settings.APP_NAME, version=__version__, debug=settings.DEBUG)
    app.state.settings = settings
    app.state.gateway = gateway

    app.add_middleware(SessionCookieMiddleware, codec=codec, settings=settings)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.stateful_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(router)
    app.include_router(session_router)

    return app
