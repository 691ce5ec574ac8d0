"""
Product Repository - Data Access Layer for Products

Handles database queries for products and returns Product domain models.

Author: TM3
Date: 2025-10-17
"""
from typing import List
from storefront.domain.product import Product
from storefront.core.database import get_db_connection_dict_with_retry


class ProductRepository:
    """
    Repository for Product data access

    Returns Product domain models, not raw dictionaries.
    """

    @staticmethod
    def _map_row_to_product(row: dict) -> Product:
        """Map a database row to the Product domain model"""
        return Product(
            id=row['id'],
            name=row['name'],
            category=row['category'],
            price=row['price']
        )

    def find_all(self) -> List[Product]:
        """
        Load every product

        Returns:
            List of products ordered by id
        """
        conn = get_db_connection_dict_with_retry()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                SELECT id, name, category, price
                FROM products
                ORDER BY id
            """)
            return [self._map_row_to_product(row) for row in cursor.fetchall()]

        finally:
            cursor.close()
            conn.close()
