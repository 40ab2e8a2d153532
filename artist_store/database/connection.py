"""
Database connection management module.

This module handles connection pool creation and teardown, and provides the
scoped connection provider that store operations borrow connections from.
"""

import logging
from contextlib import contextmanager
from typing import Iterator

import psycopg
from psycopg_pool import ConnectionPool

from ..models import DatabaseConfig

logger = logging.getLogger(__name__)


def create_db_connection_pool(config: DatabaseConfig) -> ConnectionPool:
    """
    Create a database connection pool.

    Args:
        config: Database configuration settings

    Returns:
        An open connection pool

    Raises:
        psycopg.Error: If unable to create connection pool
    """
    logger.info(
        f"Creating database connection pool (size={config.pool_size}, max_overflow={config.max_overflow})"
    )

    try:
        connection_pool = ConnectionPool(
            config.url,
            min_size=1,
            max_size=config.pool_size + config.max_overflow,
            timeout=config.connection_timeout,
            open=True,
        )
    except psycopg.Error as e:
        logger.error(f"Failed to create database connection pool: {str(e)}")
        raise

    logger.info("Database connection pool created successfully")
    return connection_pool


def get_db_connection(pool: ConnectionPool) -> "psycopg.Connection":
    """
    Get a database connection from the pool.

    Args:
        pool: Database connection pool

    Returns:
        Database connection

    Raises:
        ValueError: If no pool was supplied
    """
    if pool is None:
        raise ValueError("Connection pool is None")

    connection = pool.getconn()
    logger.debug("Retrieved database connection from pool")
    return connection


def release_db_connection(pool: ConnectionPool, connection: "psycopg.Connection") -> None:
    """
    Return a database connection to the pool.

    Args:
        pool: Database connection pool
        connection: Connection to return (ignored if None)
    """
    if pool is None or connection is None:
        return

    try:
        pool.putconn(connection)
        logger.debug("Returned database connection to pool")
    except Exception as e:
        logger.warning(f"Failed to return connection to pool: {str(e)}")


def close_db_connection_pool(pool: ConnectionPool) -> None:
    """
    Close the database connection pool.

    Args:
        pool: Database connection pool to close
    """
    if pool is None:
        logger.debug("Connection pool is None, nothing to close")
        return

    try:
        logger.info("Closing database connection pool")
        pool.close()
        logger.info("Database connection pool closed successfully")
    except Exception as e:
        logger.error(f"Error closing database connection pool: {str(e)}")


class PoolConnectionProvider:
    """
    Lends pooled connections to store operations, one scope at a time.

    Statements run inside a scope are committed when it exits normally and
    rolled back when it exits with an exception. The connection goes back to
    the pool either way.
    """

    def __init__(self, pool: ConnectionPool):
        self.pool = pool

    @contextmanager
    def connection(self) -> Iterator["psycopg.Connection"]:
        conn = get_db_connection(self.pool)
        try:
            yield conn
            conn.commit()
        except Exception:
            _rollback_quietly(conn)
            raise
        finally:
            release_db_connection(self.pool, conn)


def _rollback_quietly(conn: "psycopg.Connection") -> None:
    """Roll back, keeping the original error as the one that propagates."""
    try:
        conn.rollback()
    except Exception as e:
        logger.warning(f"Rollback failed: {str(e)}")
