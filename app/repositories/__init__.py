"""
Repositories module initialization
"""

from .product import ProductRepository

__all__ = [
    "ProductRepository",
]
