"""Shared fixtures for all tests."""
from __future__ import annotations

import pytest

from snmp_monitor.config import Config

LINK_DOWN_TRAP = (
    "cisco-sg300-28-4.example.com\n"
    "UDP: [10.0.1.109]:161->[10.0.1.70]:162\n"
    ".1.3.6.1.2.1.1.3.0 10:9:13:05.10\n"
    ".1.3.6.1.6.3.1.1.4.1.0 .1.3.6.1.6.3.1.1.5.3\n"
    ".1.3.6.1.2.1.2.2.1.1.63 63\n"
    ".1.3.6.1.2.1.2.2.1.7.63 up\n"
    ".1.3.6.1.2.1.2.2.1.8.63 down\n"
    ".1.3.6.1.6.3.18.1.3.0 10.0.1.109\n"
    ".1.3.6.1.6.3.18.1.4.0 \"public\"\n"
    ".1.3.6.1.6.3.1.1.4.3.0 .1.3.6.1.6.3.1.1.5\n"
)


@pytest.fixture
def link_down_trap() -> str:
    """A linkDown trap as snmptrapd passes it to a traphandle."""
    return LINK_DOWN_TRAP


@pytest.fixture
def config(tmp_path) -> Config:
    return Config(
        port=161,
        timeout=2,
        retries=2,
        report_file=str(tmp_path / "traps.log"),
        command_file=str(tmp_path / "nagios.cmd"),
        enrich_traps=False,
        db_enabled=False,
        db_host="localhost",
        db_user="snmp_monitor",
        db_password="password",
        db_name="snmp_monitor",
        db_connection_timeout=10,
        log_file=str(tmp_path / "snmp_monitor.log"),
    )
