import logging
from typing import Dict, List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from session_gate.exceptions import SessionGateError, ValidationError

logger = logging.getLogger(__name__)


def _field_errors(exc: RequestValidationError) -> Dict[str, List[str]]:
    errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        field = ".".join(str(x) for x in error.get("loc", []) if x != "body") or "body"
        errors.setdefault(field, []).append(error.get("msg") or "Invalid input.")
    return errors


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(SessionGateError)
    async def session_gate_error_handler(request: Request, exc: SessionGateError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        error = ValidationError(_field_errors(exc))
        return JSONResponse(status_code=error.status_code, content=error.to_dict())

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(status_code=500, content={"message": "Server Error"})
