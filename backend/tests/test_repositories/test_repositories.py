"""
Unit tests for the repositories

These tests validate repository logic without requiring a database connection.

Author: TM3
Date: 2025-10-17
"""
import pytest
from datetime import date
from decimal import Decimal
from unittest.mock import patch

from storefront.domain import Customer, Product, Order
from storefront.repositories import CustomerRepository, ProductRepository, OrderRepository


class TestCustomerRepository:
    """Test CustomerRepository methods"""

    @patch('storefront.repositories.customer_repository.get_db_connection_dict_with_retry')
    def test_find_all_returns_customers(self, mock_get_conn, mock_connection):
        # Arrange: Mock database connection
        mock_conn, mock_cursor = mock_connection
        mock_get_conn.return_value = mock_conn
        mock_cursor.fetchall.return_value = [
            {'id': 1, 'name': 'Stefan Walker', 'tier': 1},
            {'id': 2, 'name': 'Marques Nikolaus', 'tier': 2},
        ]

        # Act
        customers = CustomerRepository().find_all()

        # Assert
        assert all(isinstance(c, Customer) for c in customers)
        assert [c.name for c in customers] == ['Stefan Walker', 'Marques Nikolaus']
        mock_cursor.execute.assert_called_once()
        mock_cursor.close.assert_called_once()
        mock_conn.close.assert_called_once()


class TestProductRepository:
    """Test ProductRepository methods"""

    @patch('storefront.repositories.product_repository.get_db_connection_dict_with_retry')
    def test_find_all_returns_products(self, mock_get_conn, mock_connection):
        # Arrange
        mock_conn, mock_cursor = mock_connection
        mock_get_conn.return_value = mock_conn
        mock_cursor.fetchall.return_value = [
            {'id': 7, 'name': 'aspernatur rerum qui', 'category': 'Books', 'price': Decimal('656.42')},
        ]

        # Act
        products = ProductRepository().find_all()

        # Assert
        assert len(products) == 1
        assert isinstance(products[0], Product)
        assert products[0].price == Decimal('656.42')
        mock_conn.close.assert_called_once()

    @patch('storefront.repositories.product_repository.get_db_connection_dict_with_retry')
    def test_connection_closed_when_query_fails(self, mock_get_conn, mock_connection):
        # Arrange
        mock_conn, mock_cursor = mock_connection
        mock_get_conn.return_value = mock_conn
        mock_cursor.execute.side_effect = RuntimeError("boom")

        # Act / Assert
        with pytest.raises(RuntimeError):
            ProductRepository().find_all()

        mock_cursor.close.assert_called_once()
        mock_conn.close.assert_called_once()


class TestOrderRepository:
    """Test OrderRepository methods"""

    @patch('storefront.repositories.order_repository.get_db_connection_dict_with_retry')
    def test_find_all_groups_product_links(self, mock_get_conn, mock_connection):
        # Arrange
        mock_conn, mock_cursor = mock_connection
        mock_get_conn.return_value = mock_conn
        mock_cursor.fetchall.side_effect = [
            # Orders query
            [
                {'id': 1, 'order_date': date(2021, 2, 28), 'customer_id': 5},
                {'id': 2, 'order_date': date(2021, 3, 15), 'customer_id': 3},
                {'id': 3, 'order_date': date(2021, 4, 1), 'customer_id': 3},
            ],
            # Order/product links query
            [
                {'order_id': 1, 'product_id': 7},
                {'order_id': 1, 'product_id': 10},
                {'order_id': 2, 'product_id': 16},
            ],
        ]

        # Act
        orders = OrderRepository().find_all()

        # Assert
        assert all(isinstance(o, Order) for o in orders)
        assert [o.product_ids for o in orders] == [(7, 10), (16,), ()]
        assert orders[1].order_date == date(2021, 3, 15)
        assert mock_cursor.execute.call_count == 2
        mock_conn.close.assert_called_once()

    @patch('storefront.repositories.order_repository.get_db_connection_dict_with_retry')
    def test_find_all_without_orders_skips_link_query(self, mock_get_conn, mock_connection):
        # Arrange
        mock_conn, mock_cursor = mock_connection
        mock_get_conn.return_value = mock_conn
        mock_cursor.fetchall.return_value = []

        # Act
        orders = OrderRepository().find_all()

        # Assert
        assert orders == []
        mock_cursor.execute.assert_called_once()
        mock_conn.close.assert_called_once()
