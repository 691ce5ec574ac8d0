"""
Storefront Analytics - console runner

Loads the full dataset from PostgreSQL, lists it, then answers the question
catalogue and logs every result.

Usage:
    python -m storefront.main

Author: TM3
Date: 2025-10-17
"""
import logging
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import Any, Callable, List, Tuple

from dotenv import load_dotenv

# Load environment variables before settings are read
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(env_path)

from storefront.core.config import settings
from storefront.core.exceptions import NotFoundError
from storefront.domain import Snapshot
from storefront.services import analytics_service as analytics
from storefront.services.report_service import report
from storefront.services.snapshot_service import SnapshotService

logger = logging.getLogger(__name__)

Question = Tuple[str, Callable[[Snapshot], Any]]


def build_questions() -> List[Question]:
    """The question catalogue, in presentation order"""
    return [
        ("Books priced above 100",
         lambda s: analytics.products_in_category_above(s.products, "Books", Decimal("100"))),
        ("Orders with Baby products",
         lambda s: analytics.orders_with_category(s, "Baby")),
        ("Toys with 10% discount",
         lambda s: analytics.discount_category(s.products, "Toys", Decimal("0.9"))),
        ("Products ordered by tier 2 customers, 01-Feb-2021 to 01-Apr-2021",
         lambda s: analytics.products_by_tier_between(s, 2, date(2021, 2, 1), date(2021, 4, 1))),
        ("Cheapest Books product",
         lambda s: analytics.cheapest_in_category(s.products, "Books")),
        ("3 most recent orders",
         lambda s: analytics.most_recent_orders(s, 3)),
        ("Products ordered on 15-Mar-2021",
         lambda s: analytics.products_ordered_on(s, date(2021, 3, 15))),
        ("Lump sum of orders placed in Feb 2021",
         lambda s: analytics.total_between(s, date(2021, 2, 1), date(2021, 3, 1))),
        ("Average product price on 15-Mar-2021",
         lambda s: analytics.average_price_on(s, date(2021, 3, 15))),
        ("Books price statistics",
         lambda s: analytics.price_statistics(s.products, "Books")),
        ("Product count by order id",
         analytics.product_count_by_order),
        ("Orders grouped by customer",
         analytics.orders_by_customer),
        ("Total by order",
         analytics.order_totals),
        ("Product names by category",
         lambda s: analytics.product_names_by_category(s.products)),
        ("Most expensive product by category",
         lambda s: analytics.most_expensive_by_category(s.products)),
    ]


def list_snapshot(snapshot: Snapshot) -> None:
    """Log every loaded entity"""
    logger.info("Customers:")
    for customer in snapshot.customers:
        logger.info(f"  {customer!r}")

    logger.info("Orders:")
    for order in snapshot.orders:
        logger.info(f"  {order!r}")

    logger.info("Products:")
    for product in snapshot.products:
        logger.info(f"  {product!r}")


def run_questions(snapshot: Snapshot, questions: List[Question]) -> int:
    """
    Answer each question and report the result

    A question that fails with NotFoundError or ValueError is logged and
    skipped; the rest still run.

    Returns:
        Number of questions that failed
    """
    failures = 0
    for title, question in questions:
        try:
            report(title, question(snapshot))
        except (NotFoundError, ValueError) as e:
            failures += 1
            logger.warning(f"{title}: {e}")
    return failures


def main() -> int:
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    snapshot = SnapshotService().load()
    list_snapshot(snapshot)

    failures = run_questions(snapshot, build_questions())
    if failures:
        logger.warning(f"{failures} question(s) could not be answered")
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
