import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from ..snmp.constants import KEY_INTERFACE_INDEX, KEY_INTERFACE_NAME, KEY_TYPE
from ..snmp.parsers import Varbind


@dataclass
class TrapReport:
    """A trap received from snmptrapd, with its varbinds translated."""
    hostname: str
    comm_line: str
    buffer: str
    varbinds: List[Varbind]
    received_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def short_hostname(self) -> str:
        """Hostname up to the first dot."""
        return self.hostname.split(".", 1)[0]

    def get(self, key: str) -> Optional[str]:
        """Return the value of the first varbind with the given key."""
        for varbind_key, value in self.varbinds:
            if varbind_key == key:
                return value
        return None

    @property
    def trap_type(self) -> Optional[str]:
        return self.get(KEY_TYPE)

    @property
    def interface(self) -> Optional[str]:
        """Resolved interface name, falling back to the raw interface index."""
        name = self.get(KEY_INTERFACE_NAME)
        if name:
            return name
        index = self.get(KEY_INTERFACE_INDEX)
        return f"#{index}" if index else None

    def to_db_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for database operations."""
        return {
            'received_at': self.received_at.strftime('%Y-%m-%d %H:%M:%S'),
            'hostname': self.hostname,
            'comm_line': self.comm_line,
            'trap_type': self.trap_type,
            'raw_buffer': self.buffer,
            'varbinds': json.dumps([[key, value] for key, value in self.varbinds])
        }
