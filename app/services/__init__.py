"""
Services module initialization
"""

from .product import SORT_FIELDS, ProductService

__all__ = [
    "SORT_FIELDS",
    "ProductService",
]
