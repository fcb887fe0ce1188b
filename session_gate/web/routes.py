"""HTTP routes for the session authentication lifecycle."""

from typing import Any

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from session_gate.domain.principal import Principal
from session_gate.gateway import SessionAuthGateway, LOGIN_MESSAGE, LOGOUT_MESSAGE
from session_gate.web.dependencies import (
    get_gateway, start_session, verify_csrf, json_payload, require_principal,
)

router = APIRouter()

# Routes below run with a session: cookie in, cookie out
session_router = APIRouter(dependencies=[Depends(start_session)])


@router.get("/login", name="login")
def probe_login(gateway: SessionAuthGateway = Depends(get_gateway)):
    return JSONResponse(status_code=401, content=gateway.probe_login())


@session_router.get("/csrf-cookie", status_code=204)
def csrf_cookie():
    return Response(status_code=204)


@session_router.post("/login", dependencies=[Depends(verify_csrf)])
def login(
    request: Request,
    payload: Any = Depends(json_payload),
    gateway: SessionAuthGateway = Depends(get_gateway),
):
    request.state.session = gateway.login(request.state.session, payload)
    return {"message": LOGIN_MESSAGE}


@session_router.post("/logout", dependencies=[Depends(verify_csrf)])
def logout(request: Request, gateway: SessionAuthGateway = Depends(get_gateway)):
    request.state.session = gateway.logout(request.state.session)
    return {"message": LOGOUT_MESSAGE}


@session_router.get("/user")
def current_user(principal: Principal = Depends(require_principal)):
    return principal.to_public_dict()
