"""
Repository Layer - Data Access

This layer handles all database queries and returns domain models.
Repositories abstract away SQL details from business logic.

Author: TM3
Date: 2025-10-17
"""
from storefront.repositories.customer_repository import CustomerRepository
from storefront.repositories.product_repository import ProductRepository
from storefront.repositories.order_repository import OrderRepository

__all__ = [
    'CustomerRepository',
    'ProductRepository',
    'OrderRepository'
]
