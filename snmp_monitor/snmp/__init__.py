"""
SNMP module for trap handling and interface throughput checks.
This package provides functionality for SNMP operations, parsing responses
and trap text, translating trap OIDs, and defining SNMP constants.
"""

from .client import SnmpSession, check_snmp_tools_installed
from .constants import OID_CONSTANTS
from .parsers import parse_snmp_value, parse_varbinds, split_trap_buffer
from .translator import translate_varbind, translate_varbinds

__all__ = [
    'SnmpSession',
    'check_snmp_tools_installed',
    'OID_CONSTANTS',
    'parse_snmp_value',
    'parse_varbinds',
    'split_trap_buffer',
    'translate_varbind',
    'translate_varbinds'
]
