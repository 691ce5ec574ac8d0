"""
Customer Domain Model

Author: TM3
Date: 2025-10-17
"""
from pydantic import BaseModel, Field, ConfigDict


class Customer(BaseModel):
    """
    Customer domain model

    Fields:
        id: Internal customer ID (assigned by the database)
        name: Customer name
        tier: Segmentation level (1 = lowest)

    Customers compare and hash by id, so they can key grouped results.
    """

    id: int = Field(..., description="Customer ID")
    name: str = Field(..., description="Customer name")
    tier: int = Field(..., description="Customer tier", ge=1)

    model_config = ConfigDict(from_attributes=True, frozen=True)

    def __eq__(self, other):
        if not isinstance(other, Customer):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash((Customer, self.id))

    def to_dict(self) -> dict:
        """Convert to dictionary"""
        return self.model_dump()
