"""
Reading and writing the performance-data string of the throughput check.

The check's previous perf data (handed back by the monitoring system, e.g.
``$SERVICEPERFDATA$``) is the only state carried between two runs.
"""

from typing import Optional, Union

from ..models.interface import InterfaceStatistics

PERF_DATA_SEPARATOR = ", "


def extract_perf_value(perf_data: str, key: str) -> Optional[str]:
    """
    Return the raw value stored under key in a ``k1=v1, k2=v2`` string.

    Args:
        perf_data: Flat performance-data string
        key: Name of the value to extract

    Returns:
        Optional[str]: Text between ``key=`` and the next separator, or None if key is absent
    """
    for item in perf_data.split(PERF_DATA_SEPARATOR):
        name, separator, value = item.partition("=")
        if separator and name.strip() == key:
            return value
    return None


def format_number(value: Union[int, float]) -> str:
    """Format a counter or rate without a trailing '.0' and with at most two decimals."""
    if isinstance(value, int):
        return str(value)
    return f"{value:.2f}".rstrip("0").rstrip(".")


def format_perf_data(stats: InterfaceStatistics) -> str:
    """Render counters and rates in the shape extract_perf_value reads back."""
    return PERF_DATA_SEPARATOR.join([
        f"octets_in={format_number(stats.in_octets)}",
        f"octets_out={format_number(stats.out_octets)}",
        f"speed_in={format_number(stats.speed_in)}",
        f"speed_out={format_number(stats.speed_out)}",
    ])
