"""
PostgreSQL database access

Centralizes how repositories obtain psycopg2 connections:
- RealDictCursor connections (rows come back as dictionaries)
- Automatic retry with exponential backoff on connection failures

Author: TM3
Updated: 2025-10-17
"""
import time
import logging

import psycopg2
from psycopg2.extras import RealDictCursor

from .config import settings

logger = logging.getLogger(__name__)


def get_database_url() -> str:
    """
    Return the configured DATABASE_URL

    Raises:
        RuntimeError if DATABASE_URL is not configured
    """
    # settings.DATABASE_URL is loaded from the .env file
    database_url = settings.DATABASE_URL
    if not database_url:
        raise RuntimeError("DATABASE_URL not configured")
    return database_url


def get_db_connection_dict_with_retry(max_retries=None, retry_delay=None):
    """
    Get a psycopg2 connection with RealDictCursor and automatic retry

    Handles intermittent connection issues by:
    - Retrying failed connections up to max_retries times
    - Adding exponential backoff between retries
    - Logging connection attempts for debugging

    Args:
        max_retries: Maximum number of connection attempts (default: settings.DB_MAX_RETRIES)
        retry_delay: Initial delay between retries in seconds (default: settings.DB_RETRY_DELAY)

    Returns:
        psycopg2 connection with RealDictCursor

    Raises:
        psycopg2.OperationalError: If all retry attempts fail

    Example:
        conn = get_db_connection_dict_with_retry()
        cursor = conn.cursor()
        cursor.execute("SELECT * FROM orders")
        results = cursor.fetchall()  # Returns list of dicts
        cursor.close()
        conn.close()
    """
    if max_retries is None:
        max_retries = settings.DB_MAX_RETRIES
    if retry_delay is None:
        retry_delay = settings.DB_RETRY_DELAY

    database_url = get_database_url()
    last_error = None

    for attempt in range(1, max_retries + 1):
        try:
            logger.debug(f"Database connection attempt {attempt}/{max_retries}")
            conn = psycopg2.connect(database_url, cursor_factory=RealDictCursor)

            # Test connection with a simple query
            cursor = conn.cursor()
            cursor.execute("SELECT 1")
            cursor.close()

            logger.debug(f"Database connection successful on attempt {attempt}")
            return conn

        except psycopg2.OperationalError as e:
            last_error = e
            logger.warning(f"Connection error on attempt {attempt}/{max_retries}: {e}")

            if attempt < max_retries:
                # Exponential backoff
                delay = retry_delay * (2 ** (attempt - 1))
                logger.info(f"Retrying in {delay:.2f} seconds...")
                time.sleep(delay)
            else:
                logger.error(f"All {max_retries} connection attempts failed")
                raise

        except Exception as e:
            # For non-connection errors, fail immediately
            logger.error(f"Unexpected error during connection: {e}")
            raise

    raise last_error if last_error else RuntimeError("Connection failed after all retries")
