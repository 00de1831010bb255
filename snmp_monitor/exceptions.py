"""
Exceptions raised by the SNMP monitor.

Malformed trap text is never an error; only collaborator failures (remote
lookups, configuration) are raised and propagated to the entry point.
"""

from typing import Optional


class MonitorError(Exception):
    """Base exception for the SNMP monitor."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message}: {self.cause}"
        return self.message


class SnmpError(MonitorError):
    """A remote SNMP request failed."""

    def __init__(self, message: str, target: Optional[str] = None,
                 oid: Optional[str] = None, cause: Optional[Exception] = None):
        super().__init__(message, cause)
        self.target = target
        self.oid = oid


class InterfaceNotFoundError(MonitorError):
    """No interface name matched the requested pattern."""

    def __init__(self, target: str, pattern: str):
        super().__init__(f"No interface matching '{pattern}' found on {target}")
        self.target = target
        self.pattern = pattern


class ConfigError(MonitorError):
    """Configuration could not be loaded."""
