"""
Error taxonomy and exception handlers for the Product Service.

Every error carries a fixed, caller-safe message. Store and runtime details
are logged, never returned.
"""

import traceback

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.core.config import config
from app.core.logger import logger

INTERNAL_SERVER_ERROR = "Internal Server Error"


class ErrorResponse(Exception):
    """Base class for application errors rendered as {"error": message}"""

    default_message = "Bad Request"
    default_status_code = 400

    def __init__(self, message: str = None, status_code: int = None, details: dict = None):
        self.message = message or self.default_message
        self.status_code = status_code or self.default_status_code
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(ErrorResponse):
    """Missing or unusable request input"""
    default_message = "Invalid data"
    default_status_code = 400


class AuthError(ErrorResponse):
    """Credential verification failed or the verifier was unreachable"""
    default_message = "Unauthorized"
    default_status_code = 401


class NotFoundError(ErrorResponse):
    default_message = "Product not found"
    default_status_code = 404


class StoreFault(ErrorResponse):
    """Unexpected document store failure"""
    default_message = INTERNAL_SERVER_ERROR
    default_status_code = 500


class MalformedIdError(StoreFault):
    """Product id cannot be converted to the store's id type"""


class ErrorResponseModel(BaseModel):
    """Pydantic model for error responses"""
    error: str


def _request_metadata(request: Request, status_code: int, event: str) -> dict:
    metadata = {
        "event": event,
        "status_code": status_code,
        "url": str(request.url),
        "method": request.method,
    }
    if config.is_development:
        metadata["traceback"] = traceback.format_exc()
    return metadata


async def error_response_handler(request: Request, exc: ErrorResponse):
    """Handler for ErrorResponse and its subclasses"""
    metadata = _request_metadata(request, exc.status_code, "error_response")
    metadata["error_type"] = type(exc).__name__
    metadata.update(exc.details)

    if exc.status_code >= 500:
        # The wire message is generic, so log what actually went wrong
        logger.error(f"Error: {exc.message}", error=exc.__cause__, metadata=metadata)
    else:
        logger.warning(f"Error: {exc.message}", metadata=metadata)

    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handler for request payloads that fail schema validation"""
    metadata = _request_metadata(request, 400, "request_validation_error")
    metadata["errors"] = exc.errors()
    logger.warning("Request validation failed", metadata=metadata)

    return JSONResponse(status_code=400, content={"error": ValidationError.default_message})


async def unhandled_exception_handler(request: Request, exc: Exception):
    """Handler collapsing any unexpected exception into a generic 500"""
    logger.error(
        f"Unhandled exception: {exc}",
        error=exc,
        metadata=_request_metadata(request, 500, "unhandled_exception"),
    )
    return JSONResponse(status_code=500, content={"error": INTERNAL_SERVER_ERROR})
