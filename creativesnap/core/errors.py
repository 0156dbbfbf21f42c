"""API error types and their JSON rendering"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError
import logging

logger = logging.getLogger(__name__)


class APIError(Exception):
    """Base error carrying the HTTP status it is reported with"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: str = None):  # type: ignore
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthorized(APIError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid authorization"


class Forbidden(APIError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden access"


class InvalidArgument(APIError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid argument"


class InvalidState(APIError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid state"


class GatewayError(APIError):
    default_message = "Payment gateway error. Please try again."


class InternalError(APIError):
    pass


class ServiceUnavailable(APIError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_message = "Service unavailable"


def _render(error: APIError) -> JSONResponse:
    return JSONResponse(
        status_code=error.status_code,
        content={"error": True, "message": error.message},
    )


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"❌ {request.method} {request.url.path}: {exc.message}")
    else:
        logger.warning(f"{request.method} {request.url.path} rejected: {exc.message}")
    return _render(exc)


async def store_error_handler(request: Request, exc: PyMongoError) -> JSONResponse:
    logger.error(f"❌ Store operation failed on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return _render(InternalError("Database operation failed"))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(APIError, api_error_handler)  # type: ignore
    app.add_exception_handler(PyMongoError, store_error_handler)  # type: ignore
