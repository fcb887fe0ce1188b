"""FastAPI dependencies that carry the session through a request."""

import json
from typing import Any

from fastapi import Depends, Request

from session_gate.domain.principal import Principal
from session_gate.domain.session import Session
from session_gate.exceptions import ValidationError
from session_gate.gateway import SessionAuthGateway

CSRF_HEADERS = ("x-xsrf-token", "x-csrf-token")


def get_gateway(request: Request) -> SessionAuthGateway:
    return request.app.state.gateway


def start_session(request: Request, gateway: SessionAuthGateway = Depends(get_gateway)) -> Session:
    """Resume or start the session and hand it to the cookie middleware."""
    session = gateway.start_session(getattr(request.state, "session_id", None))
    request.state.session = session
    return session


def verify_csrf(
    request: Request,
    session: Session = Depends(start_session),
    gateway: SessionAuthGateway = Depends(get_gateway),
) -> None:
    token = next((request.headers[h] for h in CSRF_HEADERS if request.headers.get(h)), None)
    gateway.verify_csrf(session, token)


async def json_payload(request: Request, _csrf: None = Depends(verify_csrf)) -> Any:
    """
    Decoded JSON body, read only once the CSRF token has matched.

    Declaring the body as a route parameter would make FastAPI parse it
    before any dependency runs.
    """
    body = await request.body()
    if not body:
        return None

    try:
        return json.loads(body)
    except ValueError:
        raise ValidationError({"body": ["The request body must be valid JSON."]}) from None


def require_principal(
    session: Session = Depends(start_session),
    gateway: SessionAuthGateway = Depends(get_gateway),
) -> Principal:
    return gateway.current_principal(session)
