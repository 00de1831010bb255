#!/usr/bin/env python3
"""
Entry point for the SNMP monitor.
Handles argument parsing and runs either the trap handler or the throughput check.
"""

import sys
import asyncio
import argparse
import logging
from functools import partial

from .config import load_config, Config, DEFAULT_CONFIG_FILE
from .db.schema import create_database_tables
from .exceptions import MonitorError
from .output.report import ReportWriter
from .output.submission import CommandFileSubmitter
from .processing.throughput import check_throughput, format_check_output
from .processing.traps import handle_trap
from .snmp.client import SnmpSession, check_snmp_tools_installed
from .snmp.constants import STATE_OK, STATE_UNKNOWN
from .util.logging import setup_logging

logger = logging.getLogger(__name__)


def read_trap_input(filename: str = None) -> str:
    """Read the traphandle input from a file, or stdin when no file is given."""
    if filename:
        with open(filename, 'r') as file:
            return file.read()
    return sys.stdin.read()


def session_factory(config: Config, target: str, community: str) -> SnmpSession:
    return SnmpSession(target, community, port=config.port,
                       timeout=config.timeout, retries=config.retries)


async def run_trap(args, config: Config) -> int:
    """Handle one trap from snmptrapd."""
    if args.no_enrich:
        config.enrich_traps = False

    if config.enrich_traps and not await check_snmp_tools_installed():
        logger.warning("SNMP tools (net-snmp) not installed, handling trap without interface names")
        config.enrich_traps = False

    if config.db_enabled and not await create_database_tables(config):
        logger.warning("Failed to set up database tables, handling trap without archiving it")
        config.db_enabled = False

    try:
        buffer = read_trap_input(args.file)
        await handle_trap(
            buffer, config, partial(session_factory, config),
            ReportWriter(config.report_file), CommandFileSubmitter(config.command_file)
        )
    except (MonitorError, OSError) as e:
        logger.error(f"Trap processing failed: {e}")
        return 1

    return 0


async def run_throughput(args, config: Config) -> int:
    """Run the interface throughput check and print the plugin output."""
    if not await check_snmp_tools_installed():
        print("UNKNOWN - SNMP tools (net-snmp) not installed")
        return STATE_UNKNOWN

    session = session_factory(config, args.hostname, args.community)
    try:
        stats = await check_throughput(session, args.interface, args.perfdata, args.timestamp)
    except MonitorError as e:
        logger.error(f"Throughput check failed: {e}")
        print(f"UNKNOWN - {e}")
        return STATE_UNKNOWN

    print(format_check_output(stats))
    return STATE_OK


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description='SNMP trap handler and interface throughput check')
    parser.add_argument('--config', default=DEFAULT_CONFIG_FILE,
                        help=f'Configuration file (default: {DEFAULT_CONFIG_FILE})')
    parser.add_argument('-p', '--port', type=int, help='SNMP port (overrides config file)')
    parser.add_argument('-t', '--timeout', type=int, help='SNMP timeout in seconds (overrides config file)')
    parser.add_argument('--retries', type=int, help='SNMP retries (overrides config file)')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable verbose logging')

    subparsers = parser.add_subparsers(dest='command', required=True)

    trap_parser = subparsers.add_parser('trap', help='Handle a trap passed by snmptrapd (traphandle)')
    trap_parser.add_argument('-f', '--file', help='Read the trap from a file instead of stdin')
    trap_parser.add_argument('--no-enrich', action='store_true',
                             help='Do not resolve interface names for link traps')

    throughput_parser = subparsers.add_parser('throughput', help='Check interface throughput')
    throughput_parser.add_argument('-H', '--hostname', required=True, help='Address of the SNMP agent')
    throughput_parser.add_argument('-C', '--community', default='public', help='SNMP community string')
    throughput_parser.add_argument('-i', '--interface', required=True,
                                   help='Regular expression matched against interface descriptions')
    throughput_parser.add_argument('--perfdata', help='Perf data of the previous check')
    throughput_parser.add_argument('--timestamp', type=float,
                                   help='Time of the previous check in epoch seconds')

    return parser.parse_args(argv)


async def main(argv=None) -> int:
    """Main function."""
    args = parse_arguments(argv)

    try:
        config = load_config(args.config)
    except MonitorError as e:
        if args.command == 'throughput':
            print(f"UNKNOWN - {e}")
            return STATE_UNKNOWN
        print(f"Trap processing failed: {e}", file=sys.stderr)
        return 1

    setup_logging(args.verbose, config.log_file)

    # Override config with command line arguments if provided
    if args.port:
        config.port = args.port
    if args.timeout:
        config.timeout = args.timeout
    if args.retries is not None:
        config.retries = args.retries

    if args.command == 'trap':
        return await run_trap(args, config)
    return await run_throughput(args, config)


def run():
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
