"""
RabbitMQ channel owned by the application

Connects with aio-pika, declares a durable direct exchange and a durable
queue, and binds them with an empty routing key. Publishers receive the
channel explicitly from the owning application.
"""

from typing import Optional

import aio_pika

from app.core.logger import logger


class RabbitMQChannel:
    """RabbitMQ connection and channel with the product exchange/queue topology"""

    def __init__(self, rabbitmq_url: str, exchange_name: str, queue_name: str):
        self.rabbitmq_url = rabbitmq_url
        self.exchange_name = exchange_name
        self.queue_name = queue_name
        self.connection: Optional[aio_pika.abc.AbstractRobustConnection] = None
        self.channel: Optional[aio_pika.abc.AbstractChannel] = None
        self.exchange: Optional[aio_pika.abc.AbstractExchange] = None
        self.queue: Optional[aio_pika.abc.AbstractQueue] = None
        self._is_connected = False

    async def connect(self) -> None:
        """Connect and declare the exchange/queue topology"""
        try:
            logger.info("Connecting to RabbitMQ...")

            self.connection = await aio_pika.connect_robust(self.rabbitmq_url)
            self.channel = await self.connection.channel()

            # Declarations are idempotent
            self.exchange = await self.channel.declare_exchange(
                self.exchange_name,
                aio_pika.ExchangeType.DIRECT,
                durable=True,
            )
            self.queue = await self.channel.declare_queue(self.queue_name, durable=True)
            await self.queue.bind(self.exchange, routing_key="")

            self._is_connected = True
            logger.info(
                "Connected to RabbitMQ",
                metadata={
                    "event": "rabbitmq_connected",
                    "exchange": self.exchange_name,
                    "queue": self.queue_name,
                }
            )
        except Exception as e:
            logger.error(
                "Error connecting to RabbitMQ",
                error=e,
                metadata={"event": "rabbitmq_connection_error"}
            )
            self._is_connected = False
            raise

    async def close(self) -> None:
        """Close channel and connection"""
        logger.info("Closing RabbitMQ connection...")

        if self.channel is not None:
            await self.channel.close()
        if self.connection is not None:
            await self.connection.close()

        self._is_connected = False

    def is_healthy(self) -> bool:
        return (
            self._is_connected
            and self.connection is not None
            and not self.connection.is_closed
        )
