"""
Models module initialization
"""

from .product import NO_DISCOUNT, ProductBase
from .user import User

__all__ = [
    "NO_DISCOUNT",
    "ProductBase",
    "User",
]
