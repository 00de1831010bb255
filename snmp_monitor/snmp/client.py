#!/usr/bin/env python3
"""
SNMP client for executing snmpget and snmpwalk commands.
"""

import asyncio
import logging
import re
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from ..exceptions import SnmpError
from .constants import DEFAULT_SNMP_PORT, DEFAULT_SNMP_RETRIES, DEFAULT_SNMP_TIMEOUT
from .parsers import parse_snmp_response

# Configure logging
logger = logging.getLogger(__name__)

NO_SUCH_MARKERS = ("No Such Object", "No Such Instance", "No more variables")


async def check_snmp_tools_installed() -> bool:
    """
    Check if net-snmp tools are installed.

    Returns:
        bool: True if snmpget is installed, False otherwise
    """
    try:
        proc = await asyncio.create_subprocess_exec(
            "snmpget", "--version",
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE
        )
        await proc.communicate()
        return proc.returncode == 0
    except FileNotFoundError:
        logger.error("SNMP tools (net-snmp) not found. Please install net-snmp package.")
        return False


@dataclass
class SnmpSession:
    """SNMPv2c session parameters for one agent, shared by every lookup of a run."""
    target: str
    community: str
    port: int = DEFAULT_SNMP_PORT
    timeout: int = DEFAULT_SNMP_TIMEOUT
    retries: int = DEFAULT_SNMP_RETRIES

    def _command(self, tool: str, oids: Tuple[str, ...]) -> List[str]:
        return [
            tool, "-v2c", "-On",
            "-c", self.community,
            "-r", str(self.retries),
            "-t", str(self.timeout),
            f"{self.target}:{self.port}",
            *oids
        ]

    async def _run(self, tool: str, *oids: str) -> str:
        cmd = self._command(tool, oids)
        oid_text = " ".join(oids)

        try:
            proc = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE
            )
            stdout, stderr = await proc.communicate()
        except OSError as e:
            raise SnmpError(f"Error executing {tool} for {self.target} OID {oid_text}",
                            target=self.target, oid=oid_text, cause=e) from e

        if proc.returncode != 0:
            error = stderr.decode(errors="replace").strip()
            raise SnmpError(f"SNMP error for {self.target} OID {oid_text}: {error}",
                            target=self.target, oid=oid_text)

        return stdout.decode(errors="replace").strip()

    async def get(self, *oids: str) -> List[Any]:
        """
        Perform SNMP GET for one or more OIDs in a single request.

        Args:
            *oids: OIDs to query

        Returns:
            List[Any]: Parsed values in the order the OIDs were requested

        Raises:
            SnmpError: If the request fails or an OID does not exist on the agent
        """
        output = await self._run("snmpget", *oids)
        varbinds = parse_snmp_response(output)

        for oid, value in varbinds:
            if isinstance(value, str) and value.startswith(NO_SUCH_MARKERS):
                raise SnmpError(f"OID {oid} not found on {self.target}",
                                target=self.target, oid=oid)

        if len(varbinds) != len(oids):
            raise SnmpError(f"Could not parse SNMP response from {self.target}: {output}",
                            target=self.target, oid=" ".join(oids))

        logger.debug(f"SNMP GET {self.target}: {varbinds}")
        return [value for _, value in varbinds]

    async def walk(self, oid: str) -> List[Tuple[str, Any]]:
        """
        Perform SNMP WALK over a subtree.

        Args:
            oid: Base OID to walk

        Returns:
            List[Tuple[str, Any]]: Numeric OIDs and parsed values in walk order

        Raises:
            SnmpError: If the walk fails
        """
        output = await self._run("snmpwalk", oid)
        return [
            (full_oid, value) for full_oid, value in parse_snmp_response(output)
            if not (isinstance(value, str) and value.startswith(NO_SUCH_MARKERS))
        ]

    async def walk_match(self, oid: str, pattern: str) -> Optional[Tuple[str, Any]]:
        """
        Walk a subtree and return the first varbind whose value matches pattern.

        Args:
            oid: Base OID to walk
            pattern: Regular expression searched in each value

        Returns:
            Optional[Tuple[str, Any]]: The first matching (oid, value), or None
        """
        regex = re.compile(pattern)
        for full_oid, value in await self.walk(oid):
            if regex.search(str(value)):
                return full_oid, value
        return None
