"""
Order Domain Model

Represents an order placed by a customer for a set of products.

Author: TM3
Date: 2025-10-17
"""
from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Tuple
from datetime import date


class Order(BaseModel):
    """
    Order domain model

    Fields:
        id: Internal order ID (primary key)
        order_date: Date the order was placed (no time component)
        customer_id: Reference to the customer who placed the order
        product_ids: References to the ordered products

    An order holds each product at most once: duplicate ids are dropped on
    construction, keeping the first occurrence. Customer and product values
    are resolved through a Snapshot, never stored on the order itself.
    """

    id: int = Field(..., description="Internal order ID")
    order_date: date = Field(..., description="Order date")
    customer_id: int = Field(..., description="Customer ID")
    product_ids: Tuple[int, ...] = Field(default_factory=tuple, description="Ordered product IDs")

    model_config = ConfigDict(from_attributes=True, frozen=True)

    @field_validator('product_ids', mode='before')
    @classmethod
    def _drop_duplicate_products(cls, value):
        if value is None:
            return ()
        return tuple(dict.fromkeys(value))

    def __eq__(self, other):
        if not isinstance(other, Order):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash((Order, self.id))

    @property
    def product_count(self) -> int:
        """Number of distinct products in the order"""
        return len(self.product_ids)

    def to_dict(self) -> dict:
        """Convert to dictionary with ISO formatted date"""
        data = self.model_dump()
        data['order_date'] = self.order_date.isoformat()
        data['product_ids'] = list(self.product_ids)
        return data
