"""
Price statistics record returned by category summaries

Author: TM3
Date: 2025-10-17
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from decimal import Decimal


class PriceStatistics(BaseModel):
    """
    Count, sum, average, min and max of a set of prices

    An empty set has count 0, sum and average 0, and no min/max (None).
    """

    count: int = Field(0, description="Number of prices", ge=0)
    sum: Decimal = Field(Decimal('0'), description="Sum of prices")
    average: Decimal = Field(Decimal('0'), description="Average price")
    min: Optional[Decimal] = Field(None, description="Lowest price")
    max: Optional[Decimal] = Field(None, description="Highest price")

    model_config = ConfigDict(frozen=True)

    @property
    def is_empty(self) -> bool:
        return self.count == 0

    def to_dict(self) -> dict:
        """Convert to dictionary with Decimal to float conversion"""
        data = self.model_dump()
        for field in ['sum', 'average', 'min', 'max']:
            if data.get(field) is not None:
                data[field] = float(data[field])
        return data
