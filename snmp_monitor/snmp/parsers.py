#!/usr/bin/env python3
"""
Parsers for SNMP response values and snmptrapd trap text.
"""

import re
from typing import Union, List, Tuple

Varbind = Tuple[str, str]


def parse_snmp_value(value_str: str) -> Union[str, int]:
    """
    Parse SNMP value string into appropriate Python type.

    Args:
        value_str: SNMP response value as string

    Returns:
        Union[str, int]: Parsed value in appropriate Python type
    """
    # Empty string handling
    if not value_str or value_str == "STRING:":
        return ""

    # String value (quoted)
    if value_str.startswith('"') and value_str.endswith('"') and len(value_str) > 1:
        return value_str[1:-1]

    # STRING keeps its text even when it looks numeric
    string_match = re.match(r'STRING:\s*(.*)$', value_str, re.DOTALL)
    if string_match:
        text = string_match.group(1).strip()
        if len(text) > 1 and text.startswith('"') and text.endswith('"'):
            return text[1:-1]
        return text

    # INTEGER, possibly enumerated as "up(1)"
    int_match = re.search(r'INTEGER:\s*(?:\w+\()?(-?\d+)', value_str)
    if int_match:
        return int(int_match.group(1))

    # Counter32, Counter64, Gauge32
    counter_match = re.search(r'(Counter32|Counter64|Gauge32):\s*(\d+)', value_str)
    if counter_match:
        return int(counter_match.group(2))

    # Timeticks
    timeticks_match = re.search(r'Timeticks:\s*\((\d+)\)', value_str)
    if timeticks_match:
        return int(timeticks_match.group(1))

    # Hex-STRING for MAC addresses
    hex_match = re.search(r'Hex-STRING:\s*([0-9A-Fa-f\s]+)', value_str)
    if hex_match:
        hex_values = hex_match.group(1).strip().split()
        if len(hex_values) == 6:  # MAC address
            return ":".join(hex_values)
        return hex_match.group(1).strip()

    # IpAddress
    ip_match = re.search(r'IpAddress:\s*(\d+\.\d+\.\d+\.\d+)', value_str)
    if ip_match:
        return ip_match.group(1)

    try:
        return int(value_str)
    except ValueError:
        return value_str


def parse_snmp_response(output: str) -> List[Tuple[str, Union[str, int]]]:
    """
    Parse snmpget/snmpwalk output into (oid, value) pairs in output order.

    Args:
        output: Output string from an snmpget or snmpwalk command run with -On

    Returns:
        List[Tuple[str, Union[str, int]]]: Numeric OIDs and parsed values
    """
    result = []

    for line in output.split('\n'):
        if not line.strip():
            continue

        parts = line.split('=', 1)
        if len(parts) != 2:
            continue

        full_oid = parts[0].strip()
        value_part = parts[1].strip()
        result.append((full_oid, parse_snmp_value(value_part)))

    return result


def split_trap_buffer(buffer: str) -> Tuple[str, str, str]:
    """
    Split snmptrapd traphandle input into hostname, transport line and body.

    The first line names the sending device, the second shows the
    transport path (e.g. ``UDP: [10.0.1.109]:161->[10.0.1.70]:162``),
    the rest are the varbinds.
    """
    hostname, _, rest = buffer.partition("\n")
    comm_line, _, body = rest.partition("\n")
    return hostname, comm_line, body


def parse_varbinds(buffer: str) -> List[Varbind]:
    """
    Tokenize trap body text into ordered (key, value) pairs.

    Pairs are newline-terminated and split at the first space. Double
    quotes toggle quoted mode and are dropped; newlines inside quotes belong
    to the value. A final line without a newline is not emitted.
    """
    pairs = []
    key = []
    value = []
    in_value = False
    in_string = False

    for char in buffer:
        if char == '"':
            in_string = not in_string
            continue

        if char == "\n" and not in_string:
            pairs.append(("".join(key), "".join(value)))
            key = []
            value = []
            in_value = False
            continue

        if char == " " and not in_value:
            in_value = True
            continue

        if in_value:
            value.append(char)
        else:
            key.append(char)

    return pairs
