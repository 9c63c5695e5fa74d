"""
PostgreSQL database access

All database access goes through this module:
- SQLAlchemy declarative Base (schema of books, customers, orders)
- psycopg2 connections (repositories run raw SQL through RealDictCursor)
- Connection with retry logic (health probe)
"""
import logging
import time

import psycopg2
from psycopg2.extras import RealDictCursor
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import declarative_base

from .config import settings

logger = logging.getLogger(__name__)

CONNECTION_TIMEOUT = settings.DB_CONNECT_TIMEOUT


# ============================================================================
# SQLAlchemy Configuration (schema only)
# ============================================================================

# Declarative base for bookstore.models
Base = declarative_base()


def get_engine() -> Engine:
    """
    Engine for DATABASE_URL, always on the psycopg2 driver

    DATABASE_URL is shared with psycopg2.connect, so it is usually a plain
    postgresql:// URL; SQLAlchemy is told the driver explicitly.
    """
    url = make_url(settings.DATABASE_URL)
    if url.drivername in ("postgres", "postgresql"):
        url = url.set(drivername="postgresql+psycopg2")

    return create_engine(
        url,
        pool_pre_ping=True,  # check connections before handing them out
    )


def init_db() -> None:
    """
    Create any missing tables declared in bookstore.models

    Only runs when DB_AUTO_CREATE is enabled; schema changes on a real
    database belong to the migration runner.
    """
    from bookstore import models  # noqa: F401  (registers tables on Base)

    logger.info("Creating missing tables: %s", ", ".join(sorted(Base.metadata.tables)))
    engine = get_engine()
    try:
        Base.metadata.create_all(bind=engine)
    finally:
        engine.dispose()


# ============================================================================
# psycopg2 Direct Connections (for raw SQL queries)
# ============================================================================

def get_db_connection_dict():
    """
    Get a database connection with RealDictCursor (returns dictionaries)

    Returns:
        psycopg2 connection with RealDictCursor

    Example:
        conn = get_db_connection_dict()
        cursor = conn.cursor()
        cursor.execute("SELECT * FROM books")
        results = cursor.fetchall()  # Returns list of dicts
        cursor.close()
        conn.close()
    """
    database_url = settings.DATABASE_URL
    if not database_url:
        raise Exception("DATABASE_URL not configured")

    return psycopg2.connect(
        database_url,
        cursor_factory=RealDictCursor,
        connect_timeout=CONNECTION_TIMEOUT,
    )


# ============================================================================
# Database Connection with Retry Logic
# ============================================================================

def get_db_connection_with_retry(max_retries=3, retry_delay=1.0):
    """
    Get a psycopg2 connection with automatic retry on connection failures

    Args:
        max_retries: Maximum number of connection attempts (default: 3)
        retry_delay: Initial delay between retries in seconds (default: 1.0)

    Returns:
        psycopg2 connection object

    Raises:
        psycopg2.OperationalError: If all retry attempts fail
    """
    database_url = settings.DATABASE_URL
    if not database_url:
        raise Exception("DATABASE_URL not configured")

    last_error = None

    for attempt in range(1, max_retries + 1):
        try:
            logger.debug(f"Database connection attempt {attempt}/{max_retries}")
            conn = psycopg2.connect(database_url, connect_timeout=CONNECTION_TIMEOUT)

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

    raise last_error
