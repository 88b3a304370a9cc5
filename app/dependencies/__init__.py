"""
Dependencies module initialization
"""

from .auth import get_auth_verifier, get_current_user
from .product import (
    get_discount_update,
    get_product_create,
    get_product_repository,
    get_product_service,
    get_product_update,
)

__all__ = [
    "get_auth_verifier",
    "get_current_user",
    "get_discount_update",
    "get_product_create",
    "get_product_repository",
    "get_product_service",
    "get_product_update",
]
