"""
Message broker connection management
"""

from .rabbitmq import RabbitMQChannel

__all__ = ["RabbitMQChannel"]
