#!/usr/bin/env python3
"""
Constants for SNMP OIDs and trap translation tables.
"""

# OID Constants for SNMP queries
OID_CONSTANTS = {
    # Interface information
    "ifIndex": "1.3.6.1.2.1.2.2.1.1",
    "ifDescr": "1.3.6.1.2.1.2.2.1.2",
    "ifAdminStatus": "1.3.6.1.2.1.2.2.1.7",
    "ifOperStatus": "1.3.6.1.2.1.2.2.1.8",

    # Traffic counters
    "ifInOctets": "1.3.6.1.2.1.2.2.1.10",
    "ifOutOctets": "1.3.6.1.2.1.2.2.1.16",
}

# Key labels for trap varbinds, matched with startswith in this order.
# Column families end with a dot so ifIndex (.1) never matches ifInOctets (.10).
TRAP_KEY_LABELS = [
    (".1.3.6.1.2.1.1.3.0", "UP for"),            # sysUpTime
    (".1.3.6.1.6.3.1.1.4.1.0", "Type"),          # snmpTrapOID
    (".1.3.6.1.2.1.2.2.1.1.", "Interface#"),     # ifIndex
    (".1.3.6.1.2.1.2.2.1.7.", "Administrative"), # ifAdminStatus
    (".1.3.6.1.2.1.2.2.1.8.", "Operational"),    # ifOperStatus
    (".1.3.6.1.6.3.18.1.3.0", "Address"),        # snmpTrapAddress
    (".1.3.6.1.6.3.18.1.4.0", "Community"),      # snmpTrapCommunity
    (".1.3.6.1.6.3.1.1.4.3.0", "Enterprise"),    # snmpTrapEnterprise
]

# Generic trap types (snmpTraps, SNMPv2-MIB)
TRAP_TYPE_LABELS = [
    (".1.3.6.1.6.3.1.1.5.1", "coldStart"),
    (".1.3.6.1.6.3.1.1.5.2", "warmStart"),
    (".1.3.6.1.6.3.1.1.5.3", "linkDown"),
    (".1.3.6.1.6.3.1.1.5.4", "linkUp"),
    (".1.3.6.1.6.3.1.1.5.5", "authenticationFailure"),
]

# Labels the trap pipeline relies on
KEY_TYPE = "Type"
KEY_ADDRESS = "Address"
KEY_COMMUNITY = "Community"
KEY_INTERFACE_INDEX = "Interface#"
KEY_INTERFACE_NAME = "Interface"

# Default SNMP settings
DEFAULT_SNMP_PORT = 161
DEFAULT_SNMP_TIMEOUT = 2
DEFAULT_SNMP_RETRIES = 2

# Monitoring plugin states
STATE_OK = 0
STATE_CRITICAL = 2
STATE_UNKNOWN = 3
