"""
Session cookie middleware.

FLOW:
- Decode the signed session cookie into request.state.session_id.
- Routes that use sessions put the live Session on request.state.session.
- On the way out, write the session cookie and the XSRF-TOKEN cookie for it.

Requests that never touch a session route get no cookies.
"""

from starlette.middleware.base import BaseHTTPMiddleware

from session_gate.adapters.jwt_cookie import SessionCookieCodec
from session_gate.config import Settings

XSRF_COOKIE = "XSRF-TOKEN"


class SessionCookieMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, codec: SessionCookieCodec, settings: Settings):
        super().__init__(app)
        self.codec = codec
        self.settings = settings

    async def dispatch(self, request, call_next):
        request.state.session_id = self.codec.decode(request.cookies.get(self.settings.SESSION_COOKIE))
        request.state.session = None

        response = await call_next(request)

        session = request.state.session
        if session is None:
            return response

        cookie_args = {
            "max_age": self.settings.session_ttl,
            "path": "/",
            "domain": self.settings.SESSION_DOMAIN,
            "secure": self.settings.SESSION_SECURE_COOKIE,
            "samesite": self.settings.SESSION_SAME_SITE,
        }
        response.set_cookie(
            self.settings.SESSION_COOKIE,
            self.codec.encode(session.session_id),
            httponly=True,
            **cookie_args,
        )
        if session.csrf_token:
            response.set_cookie(XSRF_COOKIE, session.csrf_token, httponly=False, **cookie_args)
        return response
