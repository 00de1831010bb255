import logging
import sys


def setup_logging(verbose: bool = False, log_file: str = "snmp_monitor.log") -> logging.Logger:
    """Configure and return a logger for the application."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # stdout carries plugin output, so console logging goes to stderr
    handlers = [logging.StreamHandler(sys.stderr)]
    try:
        handlers.append(logging.FileHandler(log_file))
    except OSError as e:
        print(f"Cannot open log file {log_file}: {e}", file=sys.stderr)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )

    logger = logging.getLogger("snmp_monitor")
    logger.setLevel(log_level)

    if verbose:
        logger.debug("Verbose logging enabled")

    return logger
