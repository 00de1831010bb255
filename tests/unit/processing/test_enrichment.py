"""Unit tests for interface name enrichment of traps."""
from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from snmp_monitor.exceptions import SnmpError
from snmp_monitor.processing.enrichment import enrich_varbinds

LINK_DOWN = [
    ("Type", "linkDown"),
    ("Interface#", "63"),
    ("Address", "10.0.1.109"),
    ("Community", "public"),
]


def _factory(get):
    session = MagicMock()
    session.get = get
    return MagicMock(return_value=session)


@pytest.mark.asyncio
async def test_appends_resolved_interface_name():
    factory = _factory(AsyncMock(return_value=["gi1/0/15\r\n"]))

    result = await enrich_varbinds(LINK_DOWN, factory)

    assert result == LINK_DOWN + [("Interface", "gi1/0/15")]
    factory.assert_called_once_with("10.0.1.109", "public")
    factory.return_value.get.assert_awaited_once_with("1.3.6.1.2.1.2.2.1.2.63")


@pytest.mark.asyncio
@pytest.mark.parametrize("missing", ["Address", "Community", "Interface#"])
async def test_skips_when_required_varbind_missing(missing):
    varbinds = [varbind for varbind in LINK_DOWN if varbind[0] != missing]
    factory = _factory(AsyncMock())

    result = await enrich_varbinds(varbinds, factory)

    assert result == varbinds
    factory.assert_not_called()


@pytest.mark.asyncio
async def test_lookup_failure_propagates():
    factory = _factory(AsyncMock(side_effect=SnmpError("Timeout", target="10.0.1.109")))
    with pytest.raises(SnmpError, match="Timeout"):
        await enrich_varbinds(LINK_DOWN, factory)
