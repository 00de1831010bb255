"""
Database connection for the trap archive.

Each trap is handled by its own short-lived process, so the archive opens one
connection per run and gives up on the first error instead of retrying.
"""

import logging
from contextlib import contextmanager

import mysql.connector

from ..config import Config

logger = logging.getLogger(__name__)


@contextmanager
def db_connection(config: Config):
    """Open a connection to the archive database."""
    connection = mysql.connector.connect(
        host=config.db_host,
        user=config.db_user,
        password=config.db_password,
        database=config.db_name,
        connection_timeout=config.db_connection_timeout,
        use_pure=True,
        autocommit=False,
    )
    logger.debug(f"Connected to archive database {config.db_name} on {config.db_host}")
    try:
        yield connection
    finally:
        connection.close()
