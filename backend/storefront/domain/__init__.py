"""
Domain Layer - Business Entities

This layer contains Pydantic models representing business entities.
These models enforce type safety and validation across the application.

Author: TM3
Date: 2025-10-17
"""
from storefront.domain.customer import Customer
from storefront.domain.product import Product
from storefront.domain.order import Order
from storefront.domain.statistics import PriceStatistics
from storefront.domain.snapshot import Snapshot

__all__ = ['Customer', 'Product', 'Order', 'PriceStatistics', 'Snapshot']
