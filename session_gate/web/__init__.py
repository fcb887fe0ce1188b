"""
Web layer - FastAPI routes, cookie middleware and error handlers.
"""

from session_gate.web.app import create_app

__all__ = ["create_app"]
