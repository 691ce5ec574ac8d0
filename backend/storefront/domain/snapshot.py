"""
Snapshot - fully loaded, read-only view of customers, products and orders

Orders only store customer and product ids. The snapshot indexes the three
collections by id and resolves relationships in either direction on demand,
so there are no back-references between entities.

Author: TM3
Date: 2025-10-17
"""
from typing import Dict, Iterable, List, Tuple

from storefront.core.exceptions import SnapshotIntegrityError
from storefront.domain.customer import Customer
from storefront.domain.order import Order
from storefront.domain.product import Product


def _index_by_id(items, kind: str) -> Dict[int, object]:
    index = {}
    for item in items:
        if item.id in index:
            raise SnapshotIntegrityError(f"Duplicate {kind} id: {item.id}")
        index[item.id] = item
    return index


class Snapshot:
    """
    Immutable snapshot of the three collections, in source order

    Construction validates that ids are unique per collection and that every
    order references an existing customer and existing products.
    """

    def __init__(
        self,
        customers: Iterable[Customer] = (),
        products: Iterable[Product] = (),
        orders: Iterable[Order] = ()
    ):
        self._customers: Tuple[Customer, ...] = tuple(customers)
        self._products: Tuple[Product, ...] = tuple(products)
        self._orders: Tuple[Order, ...] = tuple(orders)

        self._customers_by_id = _index_by_id(self._customers, "customer")
        self._products_by_id = _index_by_id(self._products, "product")
        _index_by_id(self._orders, "order")

        for order in self._orders:
            if order.customer_id not in self._customers_by_id:
                raise SnapshotIntegrityError(
                    f"Order {order.id} references unknown customer {order.customer_id}"
                )
            missing = [pid for pid in order.product_ids if pid not in self._products_by_id]
            if missing:
                raise SnapshotIntegrityError(
                    f"Order {order.id} references unknown products {missing}"
                )

    @property
    def customers(self) -> Tuple[Customer, ...]:
        return self._customers

    @property
    def products(self) -> Tuple[Product, ...]:
        return self._products

    @property
    def orders(self) -> Tuple[Order, ...]:
        return self._orders

    def customer_of(self, order: Order) -> Customer:
        """Customer who placed the order"""
        return self._customers_by_id[order.customer_id]

    def products_of(self, order: Order) -> List[Product]:
        """Current product values referenced by the order, in order"""
        return [self._products_by_id[pid] for pid in order.product_ids]

    def orders_of(self, customer: Customer) -> List[Order]:
        """Orders placed by a customer, in snapshot order"""
        return [o for o in self._orders if o.customer_id == customer.id]

    def orders_containing(self, product: Product) -> List[Order]:
        """Orders that include a product, in snapshot order"""
        return [o for o in self._orders if product.id in o.product_ids]

    def __repr__(self) -> str:
        return (
            f"Snapshot(customers={len(self._customers)}, "
            f"products={len(self._products)}, orders={len(self._orders)})"
        )
