"""
Data Access Object for the trap archive.
"""

import logging
from typing import Optional

from mysql.connector import Error

from ..config import Config
from ..models.trap import TrapReport
from .connection import db_connection

logger = logging.getLogger(__name__)


async def save_trap(report: TrapReport, config: Config) -> Optional[int]:
    """
    Store a received trap in the archive.

    Args:
        report: The processed trap
        config: Application configuration

    Returns:
        Optional[int]: Trap ID if successful, None otherwise
    """
    row = report.to_db_dict()
    try:
        with db_connection(config) as connection:
            cursor = connection.cursor()
            cursor.execute(
                """
                INSERT INTO traps
                (received_at, hostname, comm_line, trap_type, raw_buffer, varbinds)
                VALUES (%s, %s, %s, %s, %s, %s)
                """,
                (
                    row['received_at'],
                    row['hostname'],
                    row['comm_line'],
                    row['trap_type'],
                    row['raw_buffer'],
                    row['varbinds']
                )
            )
            trap_id = cursor.lastrowid
            connection.commit()
            logger.info(f"Archived {row['trap_type']} trap from {row['hostname']} with ID {trap_id}")
            return trap_id

    except Error as e:
        logger.error(f"Database error saving trap from {report.hostname}: {e}")
        return None
