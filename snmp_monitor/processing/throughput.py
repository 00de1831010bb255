"""
Interface throughput check.

Finds an interface by name pattern, reads its octet counters and derives
traffic rates against the sample recorded in the previous run's perf data.
"""

import logging
import time
from typing import Optional

from ..exceptions import InterfaceNotFoundError, SnmpError
from ..models.interface import InterfaceStatistics
from ..snmp.client import SnmpSession
from ..snmp.constants import OID_CONSTANTS
from .perfdata import extract_perf_value, format_number, format_perf_data

logger = logging.getLogger(__name__)


async def find_interface(stats: InterfaceStatistics, session: SnmpSession) -> InterfaceStatistics:
    """
    Walk the interface descriptions and pick the first one matching the pattern.

    Raises:
        InterfaceNotFoundError: If no description matches
        SnmpError: If the walk fails
    """
    match = await session.walk_match(OID_CONSTANTS["ifDescr"], stats.interface_pattern)
    if match is None:
        raise InterfaceNotFoundError(session.target, stats.interface_pattern)

    oid, name = match
    stats.interface_oid = oid
    stats.interface_name = str(name)
    logger.debug(f"Interface '{stats.interface_name}' found at {oid}")
    return stats


def resolve_interface_index(stats: InterfaceStatistics) -> InterfaceStatistics:
    """Take the interface index from the last component of the interface OID."""
    stats.interface_index = int(stats.interface_oid.rsplit(".", 1)[-1])
    return stats


async def get_interface_counters(stats: InterfaceStatistics, session: SnmpSession) -> InterfaceStatistics:
    """Read ifInOctets and ifOutOctets for the resolved interface index."""
    in_octets, out_octets = await session.get(
        f"{OID_CONSTANTS['ifInOctets']}.{stats.interface_index}",
        f"{OID_CONSTANTS['ifOutOctets']}.{stats.interface_index}"
    )
    try:
        stats.in_octets = int(in_octets)
        stats.out_octets = int(out_octets)
    except (TypeError, ValueError) as e:
        raise SnmpError(f"Non-numeric octet counters from {session.target}: {in_octets!r}, {out_octets!r}",
                        target=session.target, cause=e) from e
    return stats


def _previous_counter(previous_perf_data: str, key: str) -> Optional[int]:
    value = extract_perf_value(previous_perf_data, key)
    if value is None:
        logger.warning(f"'{key}' not found in previous perf data")
        return None
    try:
        return int(float(value))
    except ValueError:
        logger.warning(f"Invalid '{key}' value in previous perf data: {value}")
        return None


def _rate(current: int, previous: Optional[int], elapsed_seconds: float) -> float:
    if previous is None:
        return 0
    # Counter wrap and counter reset both end up here as zero throughput.
    return max(0, (current - previous) / elapsed_seconds)


def calculate_rates(stats: InterfaceStatistics, previous_perf_data: Optional[str] = None,
                    previous_timestamp: Optional[float] = None,
                    now: Optional[float] = None) -> InterfaceStatistics:
    """
    Compute octets per second since the previous sample.

    Rates stay at zero when there is no previous timestamp, no previous
    perf data, or no time has elapsed. A counter lower than the previous one
    (reset or 32/64-bit wrap) also yields zero, never a negative rate.

    Args:
        stats: Statistics holding the current counters
        previous_perf_data: Perf data emitted by the previous run
        previous_timestamp: Epoch seconds of the previous run
        now: Epoch seconds of this run, defaults to the current time

    Returns:
        InterfaceStatistics: The same object with elapsed time and rates set
    """
    if previous_timestamp is None:
        return stats

    if now is None:
        now = time.time()
    stats.elapsed_seconds = now - previous_timestamp

    if stats.elapsed_seconds <= 0:
        logger.warning(f"No time elapsed since previous sample ({stats.elapsed_seconds}s), skipping rates")
        return stats

    if not previous_perf_data:
        return stats

    stats.speed_in = _rate(stats.in_octets, _previous_counter(previous_perf_data, "octets_in"),
                           stats.elapsed_seconds)
    stats.speed_out = _rate(stats.out_octets, _previous_counter(previous_perf_data, "octets_out"),
                            stats.elapsed_seconds)
    return stats


def format_check_output(stats: InterfaceStatistics) -> str:
    """Plugin output line: summary, then perf data after the pipe."""
    return (f"{stats.interface_name} IN: {format_number(stats.speed_in)}, "
            f"OUT: {format_number(stats.speed_out)} | {format_perf_data(stats)}")


async def check_throughput(session: SnmpSession, interface_pattern: str,
                           previous_perf_data: Optional[str] = None,
                           previous_timestamp: Optional[float] = None,
                           now: Optional[float] = None) -> InterfaceStatistics:
    """Run the full check against one agent; SNMP failures propagate."""
    stats = InterfaceStatistics(interface_pattern)
    stats = await find_interface(stats, session)
    stats = resolve_interface_index(stats)
    stats = await get_interface_counters(stats, session)
    stats = calculate_rates(stats, previous_perf_data, previous_timestamp, now)
    logger.info(f"{session.target} {stats.interface_name}: in={stats.in_octets} out={stats.out_octets} "
                f"speed_in={stats.speed_in} speed_out={stats.speed_out} over {stats.elapsed_seconds}s")
    return stats
