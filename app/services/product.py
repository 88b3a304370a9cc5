"""
Product service containing business logic layer
"""

from typing import Any, Dict, List

from app.core.errors import NotFoundError, StoreFault, ValidationError
from app.core.logger import logger
from app.repositories.product import ProductRepository
from app.schemas.product import ProductCreate, ProductResponse, ProductUpdate

# Accepted sort criteria (lowercase) and the stored field each one sorts on
SORT_FIELDS: Dict[str, str] = {
    "originalprice": "originalPrice",
    "name": "name",
    "temporaryprice": "temporaryPrice",
}


class ProductService:
    """Service layer for product business logic"""

    def __init__(self, repository: ProductRepository):
        self.repository = repository

    async def create_product(self, product_data: ProductCreate, created_by: str = None) -> ProductResponse:
        product = await self.repository.create(product_data)

        logger.info(
            f"Created product {product.id}",
            metadata={"event": "create_product", "product_id": product.id, "created_by": created_by}
        )
        return product

    async def list_products(self) -> List[ProductResponse]:
        products = await self.repository.list_all()
        logger.debug(f"Fetched {len(products)} products", metadata={"event": "list_products"})
        return products

    async def search_products(self, name: str) -> List[ProductResponse]:
        """
        Search products by name.

        The search text is used as a case-insensitive regular expression,
        so a plain word matches as a substring and pattern syntax is honoured.
        """
        if not name:
            raise ValidationError('Missing search query parameter "name"')

        try:
            products = await self.repository.search_by_name(name)
        except StoreFault as e:
            logger.error(
                "Product search failed",
                error=e.__cause__ or e,
                metadata={"event": "search_products_error", "search_text": name}
            )
            raise

        logger.debug(
            f"Search matched {len(products)} products",
            metadata={"event": "search_products", "search_text": name, "count": len(products)}
        )
        return products

    async def get_categories(self) -> List[Any]:
        """Get all distinct category values"""
        return await self.repository.distinct("category")

    async def get_product(self, product_id: str) -> ProductResponse:
        """Get product by ID"""
        product = await self.repository.get_by_id(product_id)
        if not product:
            raise NotFoundError()
        return product

    async def update_product(self, product_id: str, product_data: ProductUpdate, updated_by: str = None) -> ProductResponse:
        """Replace a product's fields with product_data"""
        product = await self.repository.replace(product_id, product_data)
        if not product:
            raise NotFoundError()

        logger.info(
            f"Updated product {product_id}",
            metadata={"event": "update_product", "product_id": product_id, "updated_by": updated_by}
        )
        return product

    async def delete_product(self, product_id: str, deleted_by: str = None) -> None:
        deleted = await self.repository.delete(product_id)
        if not deleted:
            raise NotFoundError()

        logger.info(
            f"Deleted product {product_id}",
            metadata={"event": "delete_product", "product_id": product_id, "deleted_by": deleted_by}
        )

    async def list_by_category(self, category: str) -> List[ProductResponse]:
        return await self.repository.find_by_category(category)

    async def list_sorted(self, criteria: str) -> List[ProductResponse]:
        """List all products ascending by one of the SORT_FIELDS criteria (case-insensitive)"""
        field = SORT_FIELDS.get(criteria.lower())
        if field is None:
            raise ValidationError("Invalid sorting criteria")
        return await self.repository.list_sorted(field)

    async def set_discount(self, product_id: str, temporary_price: float, updated_by: str = None) -> ProductResponse:
        """
        Set a product's temporary price.

        A falsy price (missing or 0) is rejected; -1 clears the discount.
        """
        if not product_id or not temporary_price:
            raise ValidationError("Invalid data")

        try:
            product = await self.repository.set_temporary_price(product_id, temporary_price)
        except StoreFault as e:
            logger.error(
                f"Failed to set discount on product {product_id}",
                error=e.__cause__ or e,
                metadata={"event": "set_discount_error", "product_id": product_id}
            )
            raise

        if not product:
            raise NotFoundError()

        logger.info(
            f"Set temporary price of product {product_id}",
            metadata={
                "event": "set_discount",
                "product_id": product_id,
                "temporary_price": temporary_price,
                "discount_active": product.has_discount(),
                "updated_by": updated_by,
            }
        )
        return product

    async def get_cart_products(self, ids: str) -> List[ProductResponse]:
        """Products for a comma-separated list of IDs; unknown IDs are omitted"""
        return await self.repository.find_by_ids(ids.split(","))
