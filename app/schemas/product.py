"""
API schemas for Product endpoints
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from app.models.product import ProductBase


class ProductCreate(ProductBase):
    """Schema for creating a product (any subset of fields)"""


class ProductUpdate(ProductBase):
    """Schema for replacing a product; omitted fields are removed from the document"""


class DiscountUpdate(BaseModel):
    """Schema for setting a product's temporary price"""
    temporaryPrice: Optional[float] = None


class ProductResponse(ProductBase):
    """Schema for product responses"""
    id: str

    model_config = ConfigDict(from_attributes=True)
