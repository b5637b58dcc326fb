"""App-wide exception handlers that keep errors inside the response envelope."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shortlink_app.schemas.url import error

logger = logging.getLogger("shortlink.api")


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Body could not be parsed into the request schema"""
    logger.info("failed to decode request body", extra={"path": request.url.path})
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error("failed to decode request"),
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(
        "unhandled exception",
        extra={"path": request.url.path},
        exc_info=(type(exc), exc, exc.__traceback__),
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error("internal error"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
