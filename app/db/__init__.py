"""
Database module initialization
"""

from .mongodb import (
    DATABASE_NAME,
    PRODUCT_COLLECTION,
    db,
    connect_to_mongo,
    close_mongo_connection,
    get_product_collection,
    ping_database,
)

__all__ = [
    "DATABASE_NAME",
    "PRODUCT_COLLECTION",
    "db",
    "connect_to_mongo",
    "close_mongo_connection",
    "get_product_collection",
    "ping_database",
]
