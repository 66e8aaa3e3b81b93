"""Exception handlers — the one place service errors become HTTP.

Services raise typed ServiceError subclasses; request validation
failures come from FastAPI as RequestValidationError. Both are
answered here with a {"detail": ...} body.
"""

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from bookmarks.services.exceptions import ServiceError


async def service_error_handler(_request: Request, exc: ServiceError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=headers,
    )


async def validation_error_handler(
    _request: Request, exc: RequestValidationError,
) -> JSONResponse:
    """Malformed bodies and path params are a plain 400, not FastAPI's 422."""
    return JSONResponse(
        status_code=400,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
