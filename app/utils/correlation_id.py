"""
Correlation ID context shared by the request middleware and the logger
"""

from contextvars import ContextVar
from typing import Optional

# Holds the correlation ID of the request being handled
correlation_id_ctx: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)


def get_correlation_id() -> Optional[str]:
    """Get the correlation ID of the request being handled, if any"""
    return correlation_id_ctx.get()


def set_correlation_id(correlation_id: str) -> None:
    correlation_id_ctx.set(correlation_id)
