"""
Trap processing pipeline.

Turns the text snmptrapd hands to a traphandle into a translated, optionally
enriched TrapReport, records it and submits the resulting service state.
"""

import logging
from typing import Optional

from ..config import Config
from ..db.trap_dao import save_trap
from ..models.trap import TrapReport
from ..output.report import ReportWriter
from ..output.submission import CheckResult, CommandFileSubmitter
from ..snmp.constants import STATE_CRITICAL, STATE_OK, STATE_UNKNOWN
from ..snmp.parsers import parse_varbinds, split_trap_buffer
from ..snmp.translator import translate_varbinds
from .enrichment import SessionFactory, enrich_varbinds

logger = logging.getLogger(__name__)

SERVICE_TRAP = "SNMP Trap"

# Trap type -> (state, per-interface service)
TRAP_STATES = {
    "linkUp": (STATE_OK, True),
    "linkDown": (STATE_CRITICAL, True),
    "coldStart": (STATE_UNKNOWN, False),
    "warmStart": (STATE_UNKNOWN, False),
    "authenticationFailure": (STATE_CRITICAL, False),
}


def trap_check_result(report: TrapReport) -> Optional[CheckResult]:
    """
    Map a trap to the passive check result it should raise.

    Returns None for trap types that carry no actionable state.
    """
    trap_type = report.trap_type
    if trap_type not in TRAP_STATES:
        return None

    state, per_interface = TRAP_STATES[trap_type]
    service = SERVICE_TRAP
    output = f"{trap_type} received from {report.hostname}"

    if per_interface and report.interface:
        service = f"Interface {report.interface}"
        output = f"{trap_type} on {report.interface}"
        details = [f"{key}: {report.get(key)}" for key in ("Administrative", "Operational")
                   if report.get(key) is not None]
        if details:
            output += " (" + ", ".join(details) + ")"

    return CheckResult(host=report.short_hostname, service=service, state=state, output=output)


async def handle_trap(buffer: str, config: Config, session_factory: SessionFactory,
                      writer: ReportWriter, submitter: CommandFileSubmitter) -> TrapReport:
    """
    Process one trap end to end.

    Enrichment failures propagate before anything is written or submitted.

    Args:
        buffer: Raw traphandle input, header lines included
        config: Application configuration
        session_factory: Builds SNMP sessions for the enrichment lookup
        writer: Destination of the human-readable report
        submitter: Destination of the passive check result

    Returns:
        TrapReport: The processed trap
    """
    hostname, comm_line, body = split_trap_buffer(buffer)
    varbinds = translate_varbinds(parse_varbinds(body))
    logger.info(f"Trap from {hostname} with {len(varbinds)} varbinds")

    if config.enrich_traps:
        varbinds = await enrich_varbinds(varbinds, session_factory)

    report = TrapReport(hostname=hostname, comm_line=comm_line, buffer=body, varbinds=varbinds)

    writer.write(report)

    if config.db_enabled:
        await save_trap(report, config)

    result = trap_check_result(report)
    if result is None:
        logger.info(f"No actionable state for trap type {report.trap_type}")
    else:
        submitter.submit(result)

    return report
