"""
Human-readable trap report, appended to a log file for every trap received.
"""

import logging

from ..models.trap import TrapReport

logger = logging.getLogger(__name__)


def format_report(report: TrapReport) -> str:
    """Render a trap as a marked block with its varbinds aligned on the colon."""
    lines = [
        f"---TRAP RECEIVED {report.received_at.isoformat()} ---",
        f"HOST: {report.hostname}",
        f"COMM: {report.comm_line}",
    ]
    text = "\n".join(lines) + "\n" + report.buffer
    if not text.endswith("\n"):
        text += "\n"

    width = max((len(key) for key, _ in report.varbinds), default=0)
    for key, value in report.varbinds:
        text += f"{key.ljust(width)}: {value}\n"

    return text + "---TRAP COMPLETE---\n"


class ReportWriter:
    """Appends formatted trap reports to a file."""

    def __init__(self, path: str):
        self.path = path

    def write(self, report: TrapReport) -> bool:
        try:
            with open(self.path, 'a') as file:
                file.write(format_report(report))
            return True
        except OSError as e:
            logger.error(f"Error writing trap report to {self.path}: {e}")
            return False
