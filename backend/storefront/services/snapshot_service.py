"""
Snapshot Service - loads the full dataset for the analytics queries

Author: TM3
Date: 2025-10-17
"""
import logging
from typing import Optional

from storefront.domain import Snapshot
from storefront.repositories import CustomerRepository, ProductRepository, OrderRepository

logger = logging.getLogger(__name__)


class SnapshotService:
    """Builds a validated Snapshot from the three repositories"""

    def __init__(
        self,
        customer_repository: Optional[CustomerRepository] = None,
        product_repository: Optional[ProductRepository] = None,
        order_repository: Optional[OrderRepository] = None
    ):
        self.customer_repository = customer_repository or CustomerRepository()
        self.product_repository = product_repository or ProductRepository()
        self.order_repository = order_repository or OrderRepository()

    def load(self) -> Snapshot:
        """
        Load all customers, products and orders

        Returns:
            Snapshot of the current data

        Raises:
            SnapshotIntegrityError: If orders reference missing customers/products
        """
        customers = self.customer_repository.find_all()
        products = self.product_repository.find_all()
        orders = self.order_repository.find_all()

        snapshot = Snapshot(customers=customers, products=products, orders=orders)
        logger.info(
            f"Loaded snapshot: {len(customers)} customers, "
            f"{len(products)} products, {len(orders)} orders"
        )
        return snapshot
