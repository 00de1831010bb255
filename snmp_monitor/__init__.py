"""
SNMP trap handler and interface throughput check for Nagios/Icinga.
"""

__version__ = "1.0.0"
