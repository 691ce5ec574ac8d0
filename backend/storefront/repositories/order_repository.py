"""
Order Repository - Data Access Layer for Orders

Handles database queries for orders and returns Order domain models
carrying their customer id and product ids.

Author: TM3
Date: 2025-10-17
"""
from typing import Dict, List
from storefront.domain.order import Order
from storefront.core.database import get_db_connection_dict_with_retry


class OrderRepository:
    """
    Repository for Order data access

    Orders reference customers and products by id only; the order/product
    join table is read in a single query and grouped per order.
    """

    def find_all(self) -> List[Order]:
        """
        Load every order with its product ids

        Returns:
            List of orders ordered by id
        """
        conn = get_db_connection_dict_with_retry()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                SELECT id, order_date, customer_id
                FROM orders
                ORDER BY id
            """)
            order_rows = cursor.fetchall()

            if not order_rows:
                return []

            # Get ALL product links in ONE QUERY (no N+1)
            cursor.execute("""
                SELECT order_id, product_id
                FROM order_products
                ORDER BY order_id, product_id
            """)

            product_ids_by_order: Dict[int, List[int]] = {}
            for link in cursor.fetchall():
                product_ids_by_order.setdefault(link['order_id'], []).append(link['product_id'])

            orders = []
            for row in order_rows:
                order_dict = dict(row)
                order_dict['product_ids'] = product_ids_by_order.get(row['id'], [])
                orders.append(Order(**order_dict))

            return orders

        finally:
            cursor.close()
            conn.close()
