"""
Analytics Service - the storefront question catalogue

Stateless query functions over a loaded Snapshot. Every function reads its
inputs only and returns a fresh list, dict or value. Empty inputs produce
empty or zero results; cheapest_in_category is the one query that fails when
nothing matches.

Money is Decimal and results are exact: nothing is rounded.

Author: TM3
Date: 2025-10-17
"""
import logging
from datetime import date
from decimal import Decimal
from typing import Dict, Iterable, List, Union

from storefront.core.exceptions import ProductNotFoundError
from storefront.domain import Customer, Order, PriceStatistics, Product, Snapshot

logger = logging.getLogger(__name__)

ZERO = Decimal('0')

Number = Union[Decimal, int, float, str]


def _to_decimal(value: Number) -> Decimal:
    """Convert via str so 0.9 becomes Decimal('0.9'), not its binary expansion"""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _in_category(product: Product, category: str) -> bool:
    return product.category.casefold() == category.casefold()


def _distinct(products: Iterable[Product]) -> List[Product]:
    """Drop repeated product ids, keeping first-seen order"""
    seen = set()
    result = []
    for product in products:
        if product.id not in seen:
            seen.add(product.id)
            result.append(product)
    return result


# ================================================================================
# FILTERS
# ================================================================================

def products_in_category_above(products: Iterable[Product], category: str, min_price: Number) -> List[Product]:
    """Products of a category priced strictly above min_price"""
    threshold = _to_decimal(min_price)
    return [p for p in products if _in_category(p, category) and p.price > threshold]


def orders_with_category(snapshot: Snapshot, category: str) -> List[Order]:
    """Orders containing at least one product of the category"""
    return [
        o for o in snapshot.orders
        if any(_in_category(p, category) for p in snapshot.products_of(o))
    ]


def discount_category(products: Iterable[Product], category: str, factor: Number) -> List[Product]:
    """
    Discounted copies of the products in a category

    Args:
        products: Products to consider
        category: Category to discount (case-insensitive)
        factor: Price multiplier, e.g. 0.9 for a 10% discount

    Returns:
        New Product values for the category only; products outside the
        category are not part of the result. Inputs are left unchanged.

    Raises:
        ValueError: If factor is negative
    """
    multiplier = _to_decimal(factor)
    if multiplier < 0:
        raise ValueError(f"Discount factor must not be negative: {factor}")

    return [
        p.with_price(p.price * multiplier)
        for p in products
        if _in_category(p, category)
    ]


def products_by_tier_between(snapshot: Snapshot, tier: int, start: date, end: date) -> List[Product]:
    """Distinct products ordered by customers of a tier within [start, end]"""
    orders = [
        o for o in snapshot.orders
        if snapshot.customer_of(o).tier == tier and start <= o.order_date <= end
    ]
    logger.debug(f"{len(orders)} orders for tier {tier} between {start} and {end}")
    return _distinct(p for o in orders for p in snapshot.products_of(o))


def products_ordered_on(snapshot: Snapshot, day: date) -> List[Product]:
    """Distinct products from orders placed exactly on a day"""
    orders = [o for o in snapshot.orders if o.order_date == day]
    for order in orders:
        logger.debug(f"Order placed on {day}: {order.id}")
    return _distinct(p for o in orders for p in snapshot.products_of(o))


# ================================================================================
# SORTING AND TOP-K
# ================================================================================

def cheapest_in_category(products: Iterable[Product], category: str) -> Product:
    """
    Lowest-priced product of a category

    Ties go to the product encountered first.

    Raises:
        ProductNotFoundError: If the category has no products
    """
    matching = [p for p in products if _in_category(p, category)]
    if not matching:
        raise ProductNotFoundError(f"No products in category: {category}")
    return min(matching, key=lambda p: p.price)


def most_recent_orders(snapshot: Snapshot, n: int) -> List[Order]:
    """
    The n most recently placed orders, newest first

    Orders on the same date keep their snapshot order. Fewer than n orders
    returns all of them.

    Raises:
        ValueError: If n is negative
    """
    if n < 0:
        raise ValueError(f"n must not be negative: {n}")
    return sorted(snapshot.orders, key=lambda o: o.order_date, reverse=True)[:n]


# ================================================================================
# AGGREGATES
# ================================================================================

def total_between(snapshot: Snapshot, start: date, end: date) -> Decimal:
    """
    Sum of product prices over orders placed in [start, end)

    A product is counted once for every order it appears in.
    """
    return sum(
        (p.price
         for o in snapshot.orders if start <= o.order_date < end
         for p in snapshot.products_of(o)),
        ZERO
    )


def average_price_on(snapshot: Snapshot, day: date) -> Decimal:
    """Average product price over orders placed on a day, 0 when there are none"""
    prices = [
        p.price
        for o in snapshot.orders if o.order_date == day
        for p in snapshot.products_of(o)
    ]
    if not prices:
        return ZERO
    return sum(prices, ZERO) / len(prices)


def price_statistics(products: Iterable[Product], category: str) -> PriceStatistics:
    """Count, sum, average, min and max of the prices in a category"""
    prices = [p.price for p in products if _in_category(p, category)]
    if not prices:
        return PriceStatistics()

    total = sum(prices, ZERO)
    return PriceStatistics(
        count=len(prices),
        sum=total,
        average=total / len(prices),
        min=min(prices),
        max=max(prices)
    )


# ================================================================================
# GROUPINGS
# ================================================================================

def product_count_by_order(snapshot: Snapshot) -> Dict[int, int]:
    """Order id -> number of distinct products in the order"""
    return {o.id: o.product_count for o in snapshot.orders}


def orders_by_customer(snapshot: Snapshot) -> Dict[Customer, List[Order]]:
    """Customer -> their orders in snapshot order"""
    grouped: Dict[Customer, List[Order]] = {}
    for order in snapshot.orders:
        grouped.setdefault(snapshot.customer_of(order), []).append(order)
    return grouped


def order_totals(snapshot: Snapshot) -> Dict[Order, Decimal]:
    """Order -> sum of its product prices (0 for an order without products)"""
    return {
        o: sum((p.price for p in snapshot.products_of(o)), ZERO)
        for o in snapshot.orders
    }


def product_names_by_category(products: Iterable[Product]) -> Dict[str, List[str]]:
    """Category (as stored) -> product names in source order"""
    grouped: Dict[str, List[str]] = {}
    for product in products:
        grouped.setdefault(product.category, []).append(product.name)
    return grouped


def most_expensive_by_category(products: Iterable[Product]) -> Dict[str, Product]:
    """
    Category (as stored) -> its highest-priced product

    Ties go to the product encountered last, unlike cheapest_in_category.
    """
    winners: Dict[str, Product] = {}
    for product in products:
        current = winners.get(product.category)
        if current is None or product.price >= current.price:
            winners[product.category] = product
    return winners
