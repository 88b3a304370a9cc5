"""
MongoDB database connection management
"""

from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from app.core.config import config
from app.core.errors import StoreFault
from app.core.logger import logger

DATABASE_NAME = "db_products"
PRODUCT_COLLECTION = "products"


class Database:
    """Database connection manager"""

    client: Optional[AsyncIOMotorClient] = None
    database: Optional[AsyncIOMotorDatabase] = None


db = Database()


async def connect_to_mongo():
    """Create database connection"""
    logger.info("Connecting to MongoDB...")

    try:
        db.client = AsyncIOMotorClient(config.mongodb_uri)
        db.database = db.client[DATABASE_NAME]

        # Test connection
        await db.client.admin.command('ping')

        logger.info(
            f"Successfully connected to MongoDB database '{DATABASE_NAME}'",
            metadata={"event": "mongodb_connected", "database": DATABASE_NAME}
        )
    except PyMongoError as e:
        logger.error(
            "Could not connect to MongoDB",
            error=e,
            metadata={"event": "mongodb_connection_error"}
        )
        raise StoreFault(f"Could not connect to MongoDB: {e}") from e


async def close_mongo_connection():
    """Close database connection"""
    logger.info("Closing connection to MongoDB...")
    if db.client is not None:
        db.client.close()
        db.client = None
        db.database = None


async def ping_database() -> bool:
    """Return True when the database answers a ping"""
    if db.client is None:
        return False
    try:
        await db.client.admin.command('ping')
        return True
    except PyMongoError as e:
        logger.warning(f"MongoDB ping failed: {e}", metadata={"event": "mongodb_ping_failed"})
        return False


async def get_database() -> AsyncIOMotorDatabase:
    """Get database instance"""
    if db.database is None:
        await connect_to_mongo()
    return db.database


async def get_product_collection() -> AsyncIOMotorCollection:
    """Get products collection"""
    database = await get_database()
    return database[PRODUCT_COLLECTION]
