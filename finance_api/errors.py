"""
Mapping of database and request-parsing errors to API responses.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import DBAPIError, SQLAlchemyError

logger = logging.getLogger(__name__)


def error_message(exc: Exception) -> str:
    """Driver message for DB-API errors, the exception text otherwise."""
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig)
    return str(exc)


def validation_message(exc: RequestValidationError) -> str:
    """Flatten validation errors into one line, e.g. ``body.amount: Input should be ...``."""
    return "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content={"error": error_message(exc)})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Unparseable input fails like a rejected insert: 500 with a free-text error
    message = validation_message(exc)
    logger.warning(f"Rejected input on {request.method} {request.url.path}: {message}")
    return JSONResponse(status_code=500, content={"error": message})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
