"""API error outcomes and the handlers that render them as {"Error": ...} bodies."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.constants import ERROR_KEY, INVALID_REQUEST, NOT_FOUND, REQUEST_FAILED

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base class for errors returned to the client."""

    status_code: int = 400
    message: str = REQUEST_FAILED

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidRequest(ApiError):
    """Malformed, missing or out-of-range fields. Raised before any store access."""

    status_code = 400
    message = INVALID_REQUEST


class NotFound(ApiError):
    """Well-formed request that matched no record."""

    status_code = 404
    message = NOT_FOUND


class RequestFailed(ApiError):
    """The store call failed. The cause is logged, never returned."""

    status_code = 400
    message = REQUEST_FAILED


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={ERROR_KEY: message})


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return error_response(exc.status_code, exc.message)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("%s %s rejected: %s", request.method, request.url.path, exc.errors())
    return error_response(InvalidRequest.status_code, InvalidRequest.message)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
