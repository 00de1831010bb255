"""Unit tests for the trap archive DAO with the MySQL pool mocked out."""
from __future__ import annotations

from contextlib import contextmanager
from unittest.mock import MagicMock, patch

import pytest
from mysql.connector import Error

from snmp_monitor.db.connection import db_connection
from snmp_monitor.db.schema import create_database_tables
from snmp_monitor.db.trap_dao import save_trap
from snmp_monitor.models.trap import TrapReport


def _connection(cursor):
    connection = MagicMock()
    connection.cursor.return_value = cursor

    @contextmanager
    def fake_db_connection(config):
        yield connection

    return connection, fake_db_connection


@pytest.fixture
def report():
    return TrapReport(hostname="sw1", comm_line="UDP", buffer="raw\n", varbinds=[("Type", "linkDown")])


@pytest.mark.asyncio
async def test_save_trap_inserts_row(report, config):
    cursor = MagicMock(lastrowid=42)
    connection, fake = _connection(cursor)

    with patch("snmp_monitor.db.trap_dao.db_connection", fake):
        assert await save_trap(report, config) == 42

    query, params = cursor.execute.call_args.args
    assert "INSERT INTO traps" in query
    assert params[1:5] == ("sw1", "UDP", "linkDown", "raw\n")
    connection.commit.assert_called_once()


@pytest.mark.asyncio
async def test_save_trap_returns_none_on_database_error(report, config):
    cursor = MagicMock()
    cursor.execute.side_effect = Error("Lost connection")
    _, fake = _connection(cursor)

    with patch("snmp_monitor.db.trap_dao.db_connection", fake):
        assert await save_trap(report, config) is None
    assert cursor.execute.call_count == 1


@pytest.mark.asyncio
async def test_create_database_tables(config):
    cursor = MagicMock()
    connection, fake = _connection(cursor)

    with patch("snmp_monitor.db.schema.db_connection", fake):
        assert await create_database_tables(config) is True

    assert "CREATE TABLE IF NOT EXISTS traps" in cursor.execute.call_args.args[0]
    connection.commit.assert_called_once()


@pytest.mark.asyncio
async def test_create_database_tables_unreachable_server(config):
    with patch("snmp_monitor.db.connection.mysql.connector.connect",
               side_effect=Error(msg="2003: Can't connect to MySQL server")):
        assert await create_database_tables(config) is False


def test_db_connection_closes_connection(config):
    connection = MagicMock()
    with patch("snmp_monitor.db.connection.mysql.connector.connect", return_value=connection) as connect:
        with db_connection(config) as opened:
            assert opened is connection

    assert connect.call_args.kwargs["host"] == "localhost"
    assert connect.call_args.kwargs["database"] == "snmp_monitor"
    connection.close.assert_called_once()
