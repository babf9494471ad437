import argparse
import logging

from eventhub.lib.exceptions import ConfigurationError
from eventhub.lib.settings import parse_log_level

# Default values for CLI args
default_log_level = logging.INFO
default_config_file_path = "eventhub.ini"
default_max_log_files = 5


def log_level_type(value):
    """Verify the log level input, either a number or a level name"""
    try:
        return parse_log_level(value)
    except ConfigurationError as e:
        raise argparse.ArgumentTypeError(str(e))


def parse_eventhub_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="eventhub", description="Run the eventhub publish/subscribe demonstration."
    )

    parser.add_argument(
        "-l",
        "--log-level",
        help=f"Logging level, int value or name (DEBUG: 10, INFO: 20, WARNING: 30, ERROR: 40, CRITICAL: 50). Overrides the config file. (default: {default_log_level})",
        type=log_level_type,
        default=None,
        required=False,
    )
    parser.add_argument(
        "--config-file",
        help=f"Path to a config file with an [EVENTHUB] section. Relative paths are resolved in the data directory. (default: {default_config_file_path})",
        default=default_config_file_path,
        required=False,
    )
    parser.add_argument(
        "--isolate-failures",
        action="store_true",
        help="Log exceptions raised by subscribers instead of aborting the fire call.",
        required=False,
    )
    parser.add_argument(
        "--log-dir",
        help="Directory for log files. (default: logs/ in the data directory)",
        default=None,
        required=False,
    )
    parser.add_argument(
        "--max-log-files",
        help=f"Number of log files to keep. (default: {default_max_log_files})",
        type=int,
        default=default_max_log_files,
        required=False,
    )

    return parser.parse_args(argv)
