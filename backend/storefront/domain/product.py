"""
Product Domain Model

Represents a product entity in the storefront catalog.
This is the single source of truth for product data structure.

Author: TM3
Date: 2025-10-17
"""
from pydantic import BaseModel, Field, ConfigDict
from decimal import Decimal


class Product(BaseModel):
    """
    Product domain model - represents a product in our catalog

    Fields:
        id: Internal product ID (primary key)
        name: Product name
        category: Product category (matched case-insensitively by queries)
        price: Current selling price, never negative

    Products are immutable. Price changes go through with_price(), which
    returns a new Product and leaves every other reference untouched.
    """

    id: int = Field(..., description="Internal product ID")
    name: str = Field(..., description="Product name")
    category: str = Field(..., description="Product category")
    price: Decimal = Field(..., description="Sale price", ge=0)

    model_config = ConfigDict(from_attributes=True, frozen=True)

    def __eq__(self, other):
        if not isinstance(other, Product):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash((Product, self.id))

    def with_price(self, price: Decimal) -> "Product":
        """
        Return a copy of this product with a different price

        The copy is validated, so a negative price raises ValidationError.
        """
        return type(self).model_validate({**self.model_dump(), "price": price})

    def to_dict(self) -> dict:
        """Convert to dictionary with Decimal to float conversion"""
        data = self.model_dump()
        data['price'] = float(data['price'])
        return data
