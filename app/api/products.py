"""
Product API endpoints
Create, update, delete and discount require a caller verified by the auth
service; every read is public.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from app.core.errors import ErrorResponseModel
from app.dependencies.auth import get_current_user
from app.dependencies.product import (
    get_discount_update,
    get_product_create,
    get_product_service,
    get_product_update,
)
from app.models.user import User
from app.schemas.product import DiscountUpdate, ProductCreate, ProductResponse, ProductUpdate
from app.services.product import ProductService

router = APIRouter()

SERVER_ERROR = {500: {"model": ErrorResponseModel, "description": "Internal Server Error"}}
UNAUTHORIZED = {401: {"model": ErrorResponseModel, "description": "Unauthorized"}}
NOT_FOUND = {404: {"model": ErrorResponseModel, "description": "Product not found"}}
BAD_REQUEST = {400: {"model": ErrorResponseModel, "description": "Invalid request"}}


def json_body(schema) -> dict:
    """OpenAPI request body for a route that parses its body in a dependency"""
    return {
        "requestBody": {
            "content": {"application/json": {"schema": schema.model_json_schema()}},
            "required": False,
        }
    }


@router.post(
    "",
    response_model=ProductResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    responses={**BAD_REQUEST, **UNAUTHORIZED, **SERVER_ERROR},
    summary="Create a new product",
    openapi_extra=json_body(ProductCreate),
)
async def create_product(
    product: ProductCreate = Depends(get_product_create),
    user: User = Depends(get_current_user),
    service: ProductService = Depends(get_product_service),
):
    return await service.create_product(product, created_by=user.id)


@router.get(
    "",
    response_model=List[ProductResponse],
    response_model_exclude_none=True,
    responses=SERVER_ERROR,
    summary="Get all products",
)
async def list_products(service: ProductService = Depends(get_product_service)):
    return await service.list_products()


@router.get(
    "/search",
    response_model=List[ProductResponse],
    response_model_exclude_none=True,
    responses={**BAD_REQUEST, **SERVER_ERROR},
    summary="Search products by name",
)
async def search_products(
    name: Optional[str] = Query(None, description="Case-insensitive pattern matched against product names"),
    service: ProductService = Depends(get_product_service),
):
    return await service.search_products(name)


@router.get(
    "/categories",
    response_model=List[Optional[str]],
    responses=SERVER_ERROR,
    summary="Get unique categories",
)
async def get_categories(service: ProductService = Depends(get_product_service)):
    return await service.get_categories()


@router.get(
    "/category/{category}",
    response_model=List[ProductResponse],
    response_model_exclude_none=True,
    responses=SERVER_ERROR,
    summary="Get products by category",
)
async def list_products_by_category(
    category: str,
    service: ProductService = Depends(get_product_service),
):
    return await service.list_by_category(category)


@router.get(
    "/sorted/{criteria}",
    response_model=List[ProductResponse],
    response_model_exclude_none=True,
    responses={**BAD_REQUEST, **SERVER_ERROR},
    summary="Get all products sorted by originalprice, name or temporaryprice",
)
async def list_products_sorted(
    criteria: str,
    service: ProductService = Depends(get_product_service),
):
    return await service.list_sorted(criteria)


@router.get(
    "/cart/{ids}",
    response_model=List[ProductResponse],
    response_model_exclude_none=True,
    responses=SERVER_ERROR,
    summary="Get the products for a comma-separated list of IDs",
)
async def get_cart_products(
    ids: str,
    service: ProductService = Depends(get_product_service),
):
    return await service.get_cart_products(ids)


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    response_model_exclude_none=True,
    responses={**NOT_FOUND, **SERVER_ERROR},
    summary="Get a product by ID",
)
async def get_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
):
    return await service.get_product(product_id)


@router.put(
    "/{product_id}",
    response_model=ProductResponse,
    response_model_exclude_none=True,
    responses={**BAD_REQUEST, **UNAUTHORIZED, **NOT_FOUND, **SERVER_ERROR},
    summary="Replace a product by ID",
    openapi_extra=json_body(ProductUpdate),
)
async def update_product(
    product_id: str,
    product: ProductUpdate = Depends(get_product_update),
    user: User = Depends(get_current_user),
    service: ProductService = Depends(get_product_service),
):
    return await service.update_product(product_id, product, updated_by=user.id)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={**UNAUTHORIZED, **NOT_FOUND, **SERVER_ERROR},
    summary="Delete a product by ID",
)
async def delete_product(
    product_id: str,
    user: User = Depends(get_current_user),
    service: ProductService = Depends(get_product_service),
):
    await service.delete_product(product_id, deleted_by=user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put(
    "/{product_id}/discount",
    response_model=ProductResponse,
    response_model_exclude_none=True,
    responses={**BAD_REQUEST, **UNAUTHORIZED, **NOT_FOUND, **SERVER_ERROR},
    summary="Update the temporary price of a product",
    openapi_extra=json_body(DiscountUpdate),
)
async def set_discount(
    product_id: str,
    discount: DiscountUpdate = Depends(get_discount_update),
    user: User = Depends(get_current_user),
    service: ProductService = Depends(get_product_service),
):
    """
    Set the product's temporaryPrice. Send -1 to remove an active discount.
    """
    return await service.set_discount(product_id, discount.temporaryPrice, updated_by=user.id)
