#!/usr/bin/env python3
"""
Load the sample storefront dataset

Creates the customers/products/orders/order_products tables if missing and
inserts the demo rows used by the console runner.

Usage:
    python3 load_sample_data.py

Author: TM3
Date: 2025-10-17
"""
import sys
import logging
from pathlib import Path

import psycopg2
from dotenv import load_dotenv

# Load backend/.env before settings are read
env_path = Path(__file__).parent.parent.parent / '.env'
load_dotenv(env_path)

from storefront.core.database import get_db_connection_dict_with_retry
from storefront.repositories.sample_data import seed_database

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main() -> int:
    try:
        conn = get_db_connection_dict_with_retry()
    except (RuntimeError, psycopg2.OperationalError) as e:
        logger.error(f"Could not connect to the database: {e}")
        return 1

    try:
        seed_database(conn)
    finally:
        conn.close()

    logger.info("✅ Sample data loaded")
    return 0


if __name__ == "__main__":
    sys.exit(main())
