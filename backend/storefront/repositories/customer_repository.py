"""
Customer Repository - Data Access Layer for Customers

Author: TM3
Date: 2025-10-17
"""
from typing import List
from storefront.domain.customer import Customer
from storefront.core.database import get_db_connection_dict_with_retry


class CustomerRepository:
    """Repository for Customer data access"""

    def find_all(self) -> List[Customer]:
        """
        Load every customer

        Returns:
            List of customers ordered by id
        """
        conn = get_db_connection_dict_with_retry()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                SELECT id, name, tier
                FROM customers
                ORDER BY id
            """)
            return [Customer(**dict(row)) for row in cursor.fetchall()]

        finally:
            cursor.close()
            conn.close()
