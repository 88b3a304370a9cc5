"""
OpenTelemetry instrumentation for FastAPI, outgoing httpx calls and PyMongo
"""

from fastapi import FastAPI
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor
from opentelemetry.instrumentation.pymongo import PymongoInstrumentor

from app.core.config import config
from app.core.logger import logger


def instrument_app(app: FastAPI) -> bool:
    """
    Instrument the application when TELEMETRY_ENABLED is set.

    Spans are created for inbound requests, auth service calls and database
    operations; exporting them is left to the configured OpenTelemetry SDK.
    Returns True if instrumentation was applied.
    """
    if not config.telemetry_enabled:
        logger.debug("OpenTelemetry instrumentation disabled")
        return False

    FastAPIInstrumentor.instrument_app(app)
    HTTPXClientInstrumentor().instrument()
    PymongoInstrumentor().instrument()

    logger.info(
        "OpenTelemetry instrumentation complete",
        metadata={"event": "telemetry_instrumented", "instrumented": ["fastapi", "httpx", "pymongo"]}
    )
    return True
