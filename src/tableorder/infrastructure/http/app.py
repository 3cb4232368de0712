"""FastAPI application factory.

Maps domain errors to HTTP status codes: validation problems (including
unknown or disallowed status changes) are 400, missing orders,
adjustments or reservations are 404, anything else is a 500.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tableorder.domain.exceptions import NotFoundError, ValidationError
from tableorder.infrastructure.config import configure_logging, get_settings
from tableorder.infrastructure.http.orders import router as orders_router
from tableorder.infrastructure.http.reservations import router as reservations_router

logger = logging.getLogger(__name__)


def _error_body(message: str, fields: dict[str, str] | None = None) -> dict:
    body: dict = {"error": message}
    if fields:
        body["fields"] = fields
    return body


async def _handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=400, content=_error_body(str(exc), exc.fields))


async def _handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    fields = {
        ".".join(str(part) for part in err["loc"] if part != "body"): err["msg"]
        for err in exc.errors()
    }
    logger.info("Malformed body for %s %s: %s", request.method, request.url.path, fields)
    return JSONResponse(status_code=400, content=_error_body("Invalid request", fields))


async def _handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content=_error_body(str(exc)))


async def _handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content=_error_body("Internal server error"))


def create_app() -> FastAPI:
    configure_logging(get_settings().log_level)

    app = FastAPI(title="Table Ordering API")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ValidationError, _handle_validation_error)
    app.add_exception_handler(RequestValidationError, _handle_request_validation_error)
    app.add_exception_handler(NotFoundError, _handle_not_found)
    app.add_exception_handler(Exception, _handle_unexpected)

    app.include_router(orders_router)
    app.include_router(reservations_router)

    @app.get("/")
    def root() -> dict[str, str]:
        return {"message": "Table Ordering API is running"}

    return app
