"""Unit tests for the trap processing pipeline."""
from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from snmp_monitor.exceptions import SnmpError
from snmp_monitor.models.trap import TrapReport
from snmp_monitor.processing.traps import handle_trap, trap_check_result


def _report(varbinds, hostname="sw1.example.com") -> TrapReport:
    return TrapReport(hostname=hostname, comm_line="UDP", buffer="", varbinds=varbinds)


def _session_factory(name="gi1/0/15"):
    session = MagicMock()
    session.get = AsyncMock(return_value=[name])
    return MagicMock(return_value=session)


# ── State mapping ────────────────────────────────────────────────


def test_link_down_uses_resolved_interface_name():
    result = trap_check_result(_report([
        ("Type", "linkDown"), ("Interface#", "15"), ("Administrative", "up"),
        ("Operational", "down"), ("Interface", "gi1/0/15"),
    ]))
    assert result.host == "sw1"
    assert result.service == "Interface gi1/0/15"
    assert result.state == 2
    assert result.output == "linkDown on gi1/0/15 (Administrative: up, Operational: down)"


def test_link_up_falls_back_to_interface_index():
    result = trap_check_result(_report([("Type", "linkUp"), ("Interface#", "15")]))
    assert result.service == "Interface #15"
    assert result.state == 0


@pytest.mark.parametrize("trap_type, state", [
    ("coldStart", 3),
    ("warmStart", 3),
    ("authenticationFailure", 2),
])
def test_device_traps_use_trap_service(trap_type, state):
    result = trap_check_result(_report([("Type", trap_type)]))
    assert result.service == "SNMP Trap"
    assert result.state == state
    assert result.output == f"{trap_type} received from sw1.example.com"


def test_unrecognized_trap_type_is_not_actionable():
    assert trap_check_result(_report([("Type", ".1.3.6.1.4.1.9.9.41.2.0.1")])) is None
    assert trap_check_result(_report([])) is None


# ── Pipeline ─────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_handle_trap_without_enrichment(link_down_trap, config):
    writer, submitter = MagicMock(), MagicMock()
    factory = _session_factory()

    report = await handle_trap(link_down_trap, config, factory, writer, submitter)

    factory.assert_not_called()
    assert report.hostname == "cisco-sg300-28-4.example.com"
    assert report.comm_line == "UDP: [10.0.1.109]:161->[10.0.1.70]:162"
    assert report.trap_type == "linkDown"
    assert report.get("Community") == "public"
    writer.write.assert_called_once_with(report)
    result = submitter.submit.call_args.args[0]
    assert (result.host, result.service, result.state) == ("cisco-sg300-28-4", "Interface #63", 2)


@pytest.mark.asyncio
async def test_handle_trap_with_enrichment(link_down_trap, config):
    config.enrich_traps = True
    writer, submitter = MagicMock(), MagicMock()
    factory = _session_factory("gi1/0/15")

    report = await handle_trap(link_down_trap, config, factory, writer, submitter)

    factory.assert_called_once_with("10.0.1.109", "public")
    assert report.varbinds[-1] == ("Interface", "gi1/0/15")
    assert submitter.submit.call_args.args[0].service == "Interface gi1/0/15"


@pytest.mark.asyncio
async def test_handle_trap_enrichment_failure_aborts(link_down_trap, config):
    config.enrich_traps = True
    writer, submitter = MagicMock(), MagicMock()
    factory = _session_factory()
    factory.return_value.get.side_effect = SnmpError("Timeout")

    with pytest.raises(SnmpError):
        await handle_trap(link_down_trap, config, factory, writer, submitter)

    writer.write.assert_not_called()
    submitter.submit.assert_not_called()


@pytest.mark.asyncio
async def test_handle_trap_archives_when_enabled(link_down_trap, config):
    config.db_enabled = True
    with patch("snmp_monitor.processing.traps.save_trap", new=AsyncMock(return_value=7)) as save:
        report = await handle_trap(link_down_trap, config, _session_factory(), MagicMock(), MagicMock())
    save.assert_awaited_once_with(report, config)


@pytest.mark.asyncio
async def test_handle_trap_without_actionable_type(config):
    buffer = "host\nUDP\n.1.3.6.1.6.3.1.1.4.1.0 .1.3.6.1.4.1.9.0.1\n"
    writer, submitter = MagicMock(), MagicMock()

    await handle_trap(buffer, config, _session_factory(), writer, submitter)

    writer.write.assert_called_once()
    submitter.submit.assert_not_called()
