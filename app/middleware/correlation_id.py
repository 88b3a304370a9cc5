"""
Correlation ID middleware for request tracing
"""

import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.config import config
from app.utils.correlation_id import get_correlation_id, set_correlation_id


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """
    Reuses the caller's correlation ID header or generates one, makes it
    available to the logger for the request's lifetime and echoes it back
    on the response.
    """

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get(config.correlation_id_header) or str(uuid.uuid4())

        set_correlation_id(correlation_id)
        request.state.correlation_id = correlation_id

        response = await call_next(request)
        response.headers[config.correlation_id_header] = correlation_id
        return response
