"""
Dependency injection for the product store, the product service and the
JSON bodies of mutating product requests.

Bodies are parsed here rather than declared as route parameters so that
credential verification always happens first: an unauthenticated request
is rejected with 401 whatever its body contains.
"""

from typing import Type, TypeVar

from fastapi import Depends, Request
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from app.core.errors import ValidationError
from app.db.mongodb import get_product_collection
from app.dependencies.auth import get_current_user
from app.models.user import User
from app.repositories.product import ProductRepository
from app.schemas.product import DiscountUpdate, ProductCreate, ProductUpdate
from app.services.product import ProductService

BodyModel = TypeVar("BodyModel", bound=BaseModel)


async def get_product_repository() -> ProductRepository:
    """Repository bound to the products collection"""
    collection = await get_product_collection()
    return ProductRepository(collection)


async def get_product_service(
    repository: ProductRepository = Depends(get_product_repository)
) -> ProductService:
    return ProductService(repository)


async def parse_json_body(request: Request, schema: Type[BodyModel]) -> BodyModel:
    """
    Validate the raw request body against schema.

    A missing body is treated as an empty JSON object, so every field keeps
    its default. Malformed JSON or invalid field values raise
    ValidationError (400 "Invalid data").
    """
    raw = await request.body()
    try:
        return schema.model_validate_json(raw or b"{}")
    except PydanticValidationError as e:
        raise ValidationError(
            details={"body_errors": e.errors(include_url=False, include_context=False)}
        ) from e


async def get_product_create(
    request: Request,
    user: User = Depends(get_current_user),
) -> ProductCreate:
    return await parse_json_body(request, ProductCreate)


async def get_product_update(
    request: Request,
    user: User = Depends(get_current_user),
) -> ProductUpdate:
    return await parse_json_body(request, ProductUpdate)


async def get_discount_update(
    request: Request,
    user: User = Depends(get_current_user),
) -> DiscountUpdate:
    return await parse_json_body(request, DiscountUpdate)
