"""
Product model shared by the API schemas and the repository
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict

# temporaryPrice value meaning "no discount is active"
NO_DISCOUNT = -1


class ProductBase(BaseModel):
    """
    Product fields as stored in the products collection.

    Every field is optional: a product may be created from any subset.
    A temporaryPrice of NO_DISCOUNT (or any falsy value) means the product
    sells at originalPrice. Numbers sent for text fields are stored as
    strings.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: Optional[str] = None
    originalPrice: Optional[float] = None
    temporaryPrice: Optional[float] = None
    description: Optional[str] = None
    category: Optional[str] = None
    imgUrl: Optional[str] = None
    discountId: Optional[str] = None

    def has_discount(self) -> bool:
        return bool(self.temporaryPrice) and self.temporaryPrice != NO_DISCOUNT
