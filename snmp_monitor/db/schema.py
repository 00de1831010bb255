"""
Database schema creation for the trap archive.
"""

import logging

from mysql.connector import Error

from ..config import Config
from .connection import db_connection

logger = logging.getLogger(__name__)


async def create_database_tables(config: Config) -> bool:
    """Create the traps table if it does not exist."""
    try:
        with db_connection(config) as connection:
            cursor = connection.cursor()

            cursor.execute("""
            CREATE TABLE IF NOT EXISTS traps (
                trap_id INT AUTO_INCREMENT,
                received_at TIMESTAMP NOT NULL,
                hostname VARCHAR(255) NOT NULL,
                comm_line VARCHAR(255),
                trap_type VARCHAR(255),
                raw_buffer TEXT,
                varbinds TEXT,
                PRIMARY KEY (trap_id),
                INDEX (hostname, received_at),
                INDEX (received_at)
            ) ENGINE=InnoDB
            """)

            connection.commit()
            logger.info("Database tables created or verified successfully.")
            return True
    except Error as e:
        logger.error(f"Error creating database tables: {e}")
        return False
