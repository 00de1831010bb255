"""
Configuration management for the SNMP monitor.
Handles loading configuration from an INI file with built-in defaults.
"""

import os
import configparser
import logging
from dataclasses import dataclass

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = 'config.ini'


@dataclass
class Config:
    """Configuration settings for the SNMP monitor."""
    port: int
    timeout: int
    retries: int
    report_file: str
    command_file: str
    enrich_traps: bool
    db_enabled: bool
    db_host: str
    db_user: str
    db_password: str
    db_name: str
    db_connection_timeout: int
    log_file: str


def load_config(path: str = DEFAULT_CONFIG_FILE) -> Config:
    """Load configuration from an INI file, creating it with defaults if missing."""
    config_parser = configparser.ConfigParser()

    # Set default values
    default_config = {
        'snmp': {
            'port': '161',
            'timeout': '2',
            'retries': '2'
        },
        'trap': {
            'report_file': '/var/log/snmptrap/traps.log',
            'command_file': '/var/lib/nagios/rw/nagios.cmd',
            'enrich': 'true'
        },
        'database': {
            'enabled': 'false',
            'host': 'localhost',
            'user': 'snmp_monitor',
            'password': 'password',
            'name': 'snmp_monitor',
            'connection_timeout': '10'
        },
        'logging': {
            'log_file': 'snmp_monitor.log'
        }
    }

    # Load default values
    config_parser.read_dict(default_config)

    if os.path.exists(path):
        config_parser.read(path)
    else:
        logger.warning(f"Config file '{path}' not found, using default values")
        try:
            with open(path, 'w') as config_file:
                config_parser.write(config_file)
            logger.info(f"Created default config file '{path}'")
        except OSError as e:
            logger.warning(f"Could not create default config file '{path}': {e}")

    # Extract values from config
    try:
        return Config(
            port=config_parser.getint('snmp', 'port'),
            timeout=config_parser.getint('snmp', 'timeout'),
            retries=config_parser.getint('snmp', 'retries'),
            report_file=config_parser.get('trap', 'report_file'),
            command_file=config_parser.get('trap', 'command_file'),
            enrich_traps=config_parser.getboolean('trap', 'enrich'),
            db_enabled=config_parser.getboolean('database', 'enabled'),
            db_host=config_parser.get('database', 'host'),
            db_user=config_parser.get('database', 'user'),
            db_password=config_parser.get('database', 'password'),
            db_name=config_parser.get('database', 'name'),
            db_connection_timeout=config_parser.getint('database', 'connection_timeout'),
            log_file=config_parser.get('logging', 'log_file')
        )
    except (configparser.Error, ValueError) as e:
        logger.error(f"Error loading configuration: {e}")
        raise ConfigError(f"Error loading configuration from '{path}'", cause=e) from e
