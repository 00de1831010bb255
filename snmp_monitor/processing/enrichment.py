"""
Trap enrichment: resolves the interface index of a link trap to its name.
"""

import logging
import re
from typing import Callable, List, Sequence

from ..snmp.client import SnmpSession
from ..snmp.constants import (
    KEY_ADDRESS, KEY_COMMUNITY, KEY_INTERFACE_INDEX, KEY_INTERFACE_NAME, OID_CONSTANTS
)
from ..snmp.parsers import Varbind

logger = logging.getLogger(__name__)

SessionFactory = Callable[[str, str], SnmpSession]

CONTROL_CHARACTERS = re.compile(r"[\x00-\x1f\x7f]")


async def enrich_varbinds(varbinds: Sequence[Varbind], session_factory: SessionFactory) -> List[Varbind]:
    """
    Append the interface name for the trap's interface index.

    The lookup goes to the trap's own agent address and community. Without
    all three of those varbinds the list is returned unchanged and no
    request is made. A failed lookup raises SnmpError.

    Args:
        varbinds: Translated varbinds of one trap
        session_factory: Builds an SnmpSession from (address, community)

    Returns:
        List[Varbind]: The varbinds, plus an ("Interface", name) pair when resolved
    """
    values = {}
    for key, value in varbinds:
        values.setdefault(key, value)

    if not all(key in values for key in (KEY_ADDRESS, KEY_COMMUNITY, KEY_INTERFACE_INDEX)):
        logger.debug("Trap lacks address, community or interface index; not enriching")
        return list(varbinds)

    session = session_factory(values[KEY_ADDRESS], values[KEY_COMMUNITY])
    oid = f"{OID_CONSTANTS['ifDescr']}.{values[KEY_INTERFACE_INDEX]}"
    name, = await session.get(oid)
    name = CONTROL_CHARACTERS.sub("", str(name))

    logger.debug(f"Interface {values[KEY_INTERFACE_INDEX]} on {values[KEY_ADDRESS]} is '{name}'")
    return list(varbinds) + [(KEY_INTERFACE_NAME, name)]
