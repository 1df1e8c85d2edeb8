"""
Exception handlers that render API errors as flat JSON bodies.

FastAPI wraps ``HTTPException.detail`` in ``{"detail": ...}`` by default;
these handlers return the ``{"message", "code"}`` body directly (also for
the routing 404/405 errors Starlette raises itself), and turn
request validation failures into 400 responses.
"""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from common.utils.exceptions import APIException
from common.utils.responses import error_response

logger = logging.getLogger(__name__)


def _format_validation_errors(exc: RequestValidationError) -> list:
    return [
        {"loc": [str(part) for part in err.get("loc", ())], "msg": err.get("msg", "")}
        for err in exc.errors()
    ]


async def api_exception_handler(request: Request, exc: APIException) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.detail,
        headers=exc.headers,
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Routing errors raised by the framework (unknown path, wrong method)."""
    try:
        code = HTTPStatus(exc.status_code).name
    except ValueError:
        code = "HTTP_ERROR"
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(str(exc.detail), code=code),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = _format_validation_errors(exc)
    message = "; ".join(
        f"{'.'.join(e['loc'][1:]) or 'body'}: {e['msg']}" for e in errors
    ) or "Validation error"
    logger.debug(f"Rejected {request.method} {request.url.path}: {message}")
    return JSONResponse(
        status_code=400,
        content=error_response(message, code="VALIDATION_ERROR", details=errors),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=500,
        content=error_response("Internal server error", code="INTERNAL_ERROR"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the API exception handlers to an application."""
    app.add_exception_handler(APIException, api_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
