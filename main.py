"""
FastAPI Application - Product Service
"""

# Load environment variables from .env file FIRST before any other imports
from dotenv import load_dotenv
load_dotenv()

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app.api import health, products
from app.core.config import config
from app.core.errors import (
    ErrorResponse,
    error_response_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from app.core.logger import logger
from app.core.telemetry import instrument_app
from app.db.mongodb import close_mongo_connection, connect_to_mongo
from app.messaging.rabbitmq import RabbitMQChannel
from app.middleware import CorrelationIdMiddleware


async def connect_message_broker(app: FastAPI) -> None:
    """Open the RabbitMQ channel when a broker URL is configured"""
    app.state.broker = None
    if not config.rabbitmq_url:
        logger.info("RABBITMQ_URL not set, skipping message broker setup")
        return

    broker = RabbitMQChannel(config.rabbitmq_url, config.rabbitmq_exchange, config.rabbitmq_queue)
    app.state.broker = broker
    try:
        await broker.connect()
    except Exception:
        # The service does not depend on the broker to serve requests
        logger.warning("Continuing without message broker", metadata={"event": "rabbitmq_unavailable"})


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info("Starting Product Service...")
    await connect_to_mongo()
    await connect_message_broker(app)

    logger.info(
        "Product Service started successfully",
        metadata={
            "service_name": config.service_name,
            "version": config.service_version,
            "environment": config.environment,
            "port": config.port
        }
    )

    yield

    logger.info("Shutting down Product Service...")
    if app.state.broker is not None:
        await app.state.broker.close()
    await close_mongo_connection()


app = FastAPI(
    title="Products API",
    description="API for managing products.",
    version=config.service_version,
    docs_url="/swagger",
    openapi_url="/swagger.json",
    redoc_url=None,
    lifespan=lifespan,
)

instrument_app(app)

app.add_exception_handler(ErrorResponse, error_response_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(CorrelationIdMiddleware)

app.include_router(health.router, tags=["health"])
app.include_router(products.router, prefix="/products", tags=["products"])


if __name__ == "__main__":
    import uvicorn

    logger.info(
        f"Starting {config.service_name} on port {config.port}",
        metadata={"environment": config.environment, "port": config.port}
    )

    uvicorn.run(
        "main:app",
        host=config.host,
        port=config.port,
        reload=config.is_development
    )
