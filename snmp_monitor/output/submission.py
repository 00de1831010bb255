"""
Passive check result submission through the Nagios/Icinga external command file.
"""

import logging
import time
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass
class CheckResult:
    """A passive service check result."""
    host: str
    service: str
    state: int
    output: str

    def to_command(self, timestamp: Optional[int] = None) -> str:
        """Format as a PROCESS_SERVICE_CHECK_RESULT external command line."""
        if timestamp is None:
            timestamp = int(time.time())
        # The command file is line and semicolon delimited
        output = self.output.replace("\n", " ").replace(";", ",")
        return f"[{timestamp}] PROCESS_SERVICE_CHECK_RESULT;{self.host};{self.service};{self.state};{output}\n"


class CommandFileSubmitter:
    """Writes check results to the monitoring system's command pipe."""

    def __init__(self, path: str):
        self.path = path

    def submit(self, result: CheckResult) -> None:
        try:
            with open(self.path, 'a') as command_file:
                command_file.write(result.to_command())
            logger.info(f"Submitted {result.service} on {result.host} with state {result.state}")
        except OSError as e:
            logger.error(f"Error submitting check result to {self.path}: {e}")
