from dataclasses import dataclass


@dataclass
class InterfaceStatistics:
    """Counters and rates for one interface, filled in stage by stage during a check."""
    interface_pattern: str
    interface_name: str = "Unknown Interface"
    interface_oid: str = "0"
    interface_index: int = 0
    in_octets: int = 0
    out_octets: int = 0
    elapsed_seconds: float = 0
    speed_in: float = 0
    speed_out: float = 0
