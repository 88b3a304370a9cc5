"""
Product repository for data access layer following Repository pattern
"""

from typing import Any, Dict, List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import PyMongoError

from app.core.errors import MalformedIdError, StoreFault
from app.core.logger import logger
from app.schemas.product import ProductCreate, ProductResponse, ProductUpdate


class ProductRepository:
    """Repository for product data access operations"""

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    @staticmethod
    def _to_object_id(product_id: str) -> ObjectId:
        if not ObjectId.is_valid(product_id):
            raise MalformedIdError(details={"product_id": product_id})
        return ObjectId(product_id)

    @staticmethod
    def _doc_to_response(doc: dict) -> Optional[ProductResponse]:
        """Convert MongoDB document to ProductResponse schema"""
        if not doc:
            return None
        doc["id"] = str(doc.pop("_id"))
        return ProductResponse(**doc)

    @staticmethod
    def _store_fault(operation: str, error: PyMongoError) -> StoreFault:
        # The request-level handler logs the fault at error level
        logger.debug(
            f"MongoDB error during {operation}: {error}",
            metadata={"event": "mongodb_error", "operation": operation, "error_type": type(error).__name__}
        )
        return StoreFault(details={"operation": operation})

    async def create(self, product_data: ProductCreate) -> ProductResponse:
        """Insert a product and return it with its assigned ID"""
        try:
            doc = product_data.model_dump(exclude_unset=True)
            result = await self.collection.insert_one(doc)
            created_doc = await self.collection.find_one({"_id": result.inserted_id})
            return self._doc_to_response(created_doc)
        except PyMongoError as e:
            raise self._store_fault("create", e) from e

    async def get_by_id(self, product_id: str) -> Optional[ProductResponse]:
        """Get product by ID, or None when no document has that ID"""
        obj_id = self._to_object_id(product_id)
        try:
            doc = await self.collection.find_one({"_id": obj_id})
            return self._doc_to_response(doc)
        except PyMongoError as e:
            raise self._store_fault("get_by_id", e) from e

    async def find(self, query: Dict[str, Any], sort_field: Optional[str] = None) -> List[ProductResponse]:
        """Find all products matching a query, optionally sorted ascending by one field"""
        try:
            cursor = self.collection.find(query)
            if sort_field:
                cursor = cursor.sort(sort_field, ASCENDING)
            docs = await cursor.to_list(length=None)
            return [self._doc_to_response(doc) for doc in docs]
        except PyMongoError as e:
            raise self._store_fault("find", e) from e

    async def list_all(self) -> List[ProductResponse]:
        return await self.find({})

    async def search_by_name(self, pattern: str) -> List[ProductResponse]:
        """Products whose name matches the pattern, case-insensitively"""
        return await self.find({"name": {"$regex": pattern, "$options": "i"}})

    async def find_by_category(self, category: str) -> List[ProductResponse]:
        return await self.find({"category": category})

    async def list_sorted(self, field: str) -> List[ProductResponse]:
        return await self.find({}, sort_field=field)

    async def find_by_ids(self, product_ids: List[str]) -> List[ProductResponse]:
        """Products whose ID is in product_ids; unknown IDs are skipped"""
        obj_ids = [self._to_object_id(product_id) for product_id in product_ids]
        return await self.find({"_id": {"$in": obj_ids}})

    async def distinct(self, field: str) -> List[Any]:
        try:
            return await self.collection.distinct(field)
        except PyMongoError as e:
            raise self._store_fault("distinct", e) from e

    async def replace(self, product_id: str, product_data: ProductUpdate) -> Optional[ProductResponse]:
        """Replace every field of a product, keeping its ID"""
        obj_id = self._to_object_id(product_id)
        try:
            doc = await self.collection.find_one_and_replace(
                {"_id": obj_id},
                product_data.model_dump(exclude_unset=True),
                return_document=ReturnDocument.AFTER,
            )
            return self._doc_to_response(doc)
        except PyMongoError as e:
            raise self._store_fault("replace", e) from e

    async def set_temporary_price(self, product_id: str, temporary_price: float) -> Optional[ProductResponse]:
        obj_id = self._to_object_id(product_id)
        try:
            doc = await self.collection.find_one_and_update(
                {"_id": obj_id},
                {"$set": {"temporaryPrice": temporary_price}},
                return_document=ReturnDocument.AFTER,
            )
            return self._doc_to_response(doc)
        except PyMongoError as e:
            raise self._store_fault("set_temporary_price", e) from e

    async def delete(self, product_id: str) -> bool:
        """Delete a product; False when no document had that ID"""
        obj_id = self._to_object_id(product_id)
        try:
            result = await self.collection.delete_one({"_id": obj_id})
            return result.deleted_count > 0
        except PyMongoError as e:
            raise self._store_fault("delete", e) from e
