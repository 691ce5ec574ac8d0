"""
Pytest fixtures and configuration for Storefront Analytics tests

This file provides shared fixtures that can be used across all test modules.

Author: TM3
Date: 2025-10-17
"""
import pytest
from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from storefront.domain import Customer, Product, Order, Snapshot


@pytest.fixture
def customers():
    """Two tier 1 customers and one tier 2 customer"""
    return [
        Customer(id=1, name="Stefan Walker", tier=1),
        Customer(id=2, name="Marques Nikolaus", tier=2),
        Customer(id=3, name="Daija Von", tier=1),
    ]


@pytest.fixture
def products():
    """
    Catalog used across the query tests

    Books: 120, 80, 80 (tie for cheapest), Toys: 50, 50 (tie for most
    expensive), Baby: 30
    """
    return [
        Product(id=1, name="Dune", category="Books", price=Decimal("120.00")),
        Product(id=2, name="Emma", category="Books", price=Decimal("80.00")),
        Product(id=3, name="Yo-yo", category="Toys", price=Decimal("50.00")),
        Product(id=4, name="Ulysses", category="books", price=Decimal("80.00")),
        Product(id=5, name="Kite", category="Toys", price=Decimal("50.00")),
        Product(id=6, name="Rattle", category="Baby", price=Decimal("30.00")),
    ]


@pytest.fixture
def orders():
    """Orders spread over Feb-Apr 2021"""
    return [
        Order(id=10, order_date=date(2021, 2, 1), customer_id=2, product_ids=[1, 3]),
        Order(id=11, order_date=date(2021, 3, 15), customer_id=1, product_ids=[2, 6]),
        Order(id=12, order_date=date(2021, 3, 15), customer_id=2, product_ids=[1]),
        Order(id=13, order_date=date(2021, 4, 1), customer_id=2, product_ids=[3, 5]),
        Order(id=14, order_date=date(2021, 4, 2), customer_id=2, product_ids=[4]),
        Order(id=15, order_date=date(2021, 2, 28), customer_id=3, product_ids=[]),
    ]


@pytest.fixture
def snapshot(customers, products, orders):
    """Snapshot built from the customers, products and orders fixtures"""
    return Snapshot(customers=customers, products=products, orders=orders)


@pytest.fixture
def empty_snapshot():
    return Snapshot()


@pytest.fixture
def mock_connection():
    """
    Provides a MagicMock psycopg2 connection and its cursor

    Returns:
        Tuple of (connection, cursor)
    """
    mock_conn = MagicMock()
    mock_cursor = MagicMock()
    mock_conn.cursor.return_value = mock_cursor
    return mock_conn, mock_cursor
