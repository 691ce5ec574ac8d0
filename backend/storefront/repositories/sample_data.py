"""
Sample storefront dataset and schema

Used by scripts/data_loading/load_sample_data.py to create the tables the
repositories read from and fill them with demo rows.

Author: TM3
Date: 2025-10-17
"""
import logging
from datetime import date
from decimal import Decimal

logger = logging.getLogger(__name__)


SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS customers (
    id BIGSERIAL PRIMARY KEY,
    name VARCHAR(255) NOT NULL,
    tier INTEGER NOT NULL CHECK (tier >= 1)
);

CREATE TABLE IF NOT EXISTS products (
    id BIGSERIAL PRIMARY KEY,
    name VARCHAR(255) NOT NULL,
    category VARCHAR(100) NOT NULL,
    price NUMERIC(12, 2) NOT NULL CHECK (price >= 0)
);

CREATE TABLE IF NOT EXISTS orders (
    id BIGSERIAL PRIMARY KEY,
    order_date DATE NOT NULL,
    customer_id BIGINT NOT NULL REFERENCES customers(id)
);

CREATE TABLE IF NOT EXISTS order_products (
    order_id BIGINT NOT NULL REFERENCES orders(id),
    product_id BIGINT NOT NULL REFERENCES products(id),
    PRIMARY KEY (order_id, product_id)
);
"""


# (id, name, tier)
SAMPLE_CUSTOMERS = [
    (1, "Stefan Walker", 1),
    (2, "Daija Von", 1),
    (3, "Ariane Rodriguez", 1),
    (4, "Marques Nikolaus", 2),
    (5, "Rachelle Greenfelder", 2),
    (6, "Larissa White", 2),
    (7, "Fae Heidenreich", 3),
    (8, "Dino Will", 3),
]

# (id, name, category, price)
SAMPLE_PRODUCTS = [
    (1, "omnis quod consequatur", "Games", Decimal("184.83")),
    (2, "vel libero suscipit", "Toys", Decimal("12.66")),
    (3, "non nemo iure", "Grocery", Decimal("498.02")),
    (4, "voluptatem voluptas aspernatur", "Toys", Decimal("536.80")),
    (5, "animi cum rem", "Games", Decimal("458.20")),
    (6, "dolorem porro debitis", "Toys", Decimal("146.52")),
    (7, "aspernatur rerum qui", "Books", Decimal("656.42")),
    (8, "deleniti earum et", "Baby", Decimal("41.46")),
    (9, "voluptas ut quidem", "Books", Decimal("697.57")),
    (10, "eos sed debitis", "Baby", Decimal("366.90")),
    (11, "laudantium sit nihil", "Toys", Decimal("95.50")),
    (12, "ut perferendis corporis", "Grocery", Decimal("302.19")),
    (13, "sint voluptatem ut", "Toys", Decimal("295.37")),
    (14, "quos sunt ipsam", "Grocery", Decimal("534.64")),
    (15, "qui illo error", "Baby", Decimal("623.58")),
    (16, "quia ut sequi", "Books", Decimal("45.84")),
    (17, "dolore nostrum rem", "Books", Decimal("111.35")),
    (18, "ab voluptas quod", "Books", Decimal("94.61")),
]

# (id, order_date, customer_id, [product ids])
SAMPLE_ORDERS = [
    (1, date(2021, 2, 28), 5, [1, 7, 10]),
    (2, date(2021, 2, 28), 3, [2, 16]),
    (3, date(2021, 4, 10), 5, [3, 9]),
    (4, date(2021, 3, 22), 3, [4, 12, 17]),
    (5, date(2021, 3, 4), 1, [5, 14]),
    (6, date(2021, 3, 30), 2, [6, 8]),
    (7, date(2021, 3, 5), 8, [7, 11, 18]),
    (8, date(2021, 3, 27), 4, [8, 15]),
    (9, date(2021, 4, 14), 6, [9, 2, 13]),
    (10, date(2021, 3, 15), 7, [10, 16]),
    (11, date(2021, 2, 10), 4, [11, 5, 18]),
    (12, date(2021, 3, 15), 6, [12, 1, 9]),
    (13, date(2021, 3, 15), 2, [13, 7]),
    (14, date(2021, 1, 22), 8, [14, 3]),
    (15, date(2021, 2, 1), 4, [15, 17, 4]),
    (16, date(2021, 4, 1), 5, [16, 6]),
]


def seed_database(conn) -> None:
    """
    Create the schema and insert the sample rows

    Existing rows with the same ids are left untouched (ON CONFLICT DO
    NOTHING), so running the seed twice is harmless.

    Args:
        conn: Open psycopg2 connection; committed on success, rolled back on error
    """
    cursor = conn.cursor()

    try:
        cursor.execute(SCHEMA_SQL)

        cursor.executemany(
            "INSERT INTO customers (id, name, tier) VALUES (%s, %s, %s) ON CONFLICT (id) DO NOTHING",
            SAMPLE_CUSTOMERS
        )
        cursor.executemany(
            "INSERT INTO products (id, name, category, price) VALUES (%s, %s, %s, %s) ON CONFLICT (id) DO NOTHING",
            SAMPLE_PRODUCTS
        )
        cursor.executemany(
            "INSERT INTO orders (id, order_date, customer_id) VALUES (%s, %s, %s) ON CONFLICT (id) DO NOTHING",
            [(order_id, order_date, customer_id) for order_id, order_date, customer_id, _ in SAMPLE_ORDERS]
        )
        cursor.executemany(
            "INSERT INTO order_products (order_id, product_id) VALUES (%s, %s) ON CONFLICT DO NOTHING",
            [(order_id, product_id) for order_id, _, _, product_ids in SAMPLE_ORDERS for product_id in product_ids]
        )

        conn.commit()
        logger.info(
            f"Seeded {len(SAMPLE_CUSTOMERS)} customers, {len(SAMPLE_PRODUCTS)} products, "
            f"{len(SAMPLE_ORDERS)} orders"
        )

    except Exception:
        conn.rollback()
        raise

    finally:
        cursor.close()
