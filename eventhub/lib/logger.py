import logging
import logging.handlers
import os
from datetime import datetime
from pathlib import Path

from eventhub.constants import get_data_directory


def get_log_directory() -> Path:
    """Get the log directory path, a logs/ folder inside the data directory

    Returns:
        Path: The path to the log directory
    """
    return Path(get_data_directory()) / "logs"


def clean_old_logs(log_dir: Path, max_files: int = 5):
    """Remove old log files, keeping only the most recent `max_files` logs

    Log files are sorted by modification time and the oldest are removed until only
    `max_files` remain. A missing directory is treated as empty.

    Args:
        log_dir (Path): The directory where the log files are stored.
        max_files (int, optional): The maximum number of log files to keep. Defaults to 5.

    Raises:
        PermissionError: If there is no permission to delete log files.
    """
    log_files = sorted(log_dir.glob("*.log"), key=os.path.getmtime)
    while len(log_files) > max_files:
        old_log = log_files.pop(0)
        old_log.unlink()


class CustomFormatter(logging.Formatter):
    def format(self, record):
        record.levelname = record.levelname.ljust(8)
        return super().format(record)


def configure_logger(
    log_level: int = logging.DEBUG, log_dir: Path | None = None, max_log_files: int = 5
) -> Path:
    """Configures the logger with log file, format and level

    There are two formatters, one for the console and one for the log file. The console
    formatter drops the date and time, the log file keeps the full timestamp.

    Args:
        log_level (int): The log level to log at. Defaults to logging.DEBUG.
        log_dir (Path | None): Where to store the logs. Defaults to the data directory.
        max_log_files (int): Keeps only the previous (n) number of log files. Defaults to 5.

    Returns:
        Path: The log file written by this run.
    """
    if log_dir is None:
        log_dir = get_log_directory()

    log_dir.mkdir(exist_ok=True, parents=True)
    clean_old_logs(log_dir=log_dir, max_files=max_log_files)

    log_filename = log_dir / datetime.now().strftime("%Y-%m-%d_%H-%M-%S.log")

    file_handler = logging.handlers.RotatingFileHandler(
        log_filename, maxBytes=10 * 1024**2, backupCount=5, encoding="utf-8"
    )
    stream_handler = logging.StreamHandler()

    file_formatter = CustomFormatter(
        "[%(asctime)s] %(levelname)s %(message)s", datefmt="%d.%m.%Y %H:%M:%S"
    )
    console_formatter = logging.Formatter("%(levelname)s %(message)s", datefmt="%H:%M:%S")

    file_handler.setFormatter(file_formatter)
    stream_handler.setFormatter(console_formatter)

    logging.basicConfig(level=log_level, handlers=[file_handler, stream_handler], force=True)

    # Ensure all existing loggers use the same configuration
    for name in logging.root.manager.loggerDict:
        logger = logging.getLogger(name)
        if isinstance(logger, logging.Logger):
            logger.handlers.clear()
            logger.setLevel(log_level)

    return log_filename
