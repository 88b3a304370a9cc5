"""
API module initialization
"""

from . import health, products

__all__ = ["health", "products"]
